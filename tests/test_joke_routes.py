# =============================================================================
# tests/test_joke_routes.py - Joke Page Tests
# =============================================================================
# Integration tests for everything under /jokes through the FastAPI
# TestClient. Ownership and the _method form are the interesting parts.
# =============================================================================

from urllib.parse import urlencode

from core.services import JOKE_LIST_LIMIT, JokeService
from lib.tables import User


def login_redirect(path: str) -> str:
    return f"/login?{urlencode({'redirectTo': path})}"


# =============================================================================
# GET /jokes
# =============================================================================

class TestJokesIndex:
    """Tests for the jokes index page."""

    def test_shows_random_joke_and_list(self, client, joke):
        response = client.get("/jokes")

        assert response.status_code == 200
        assert joke.content in response.text
        assert f'href="/jokes/{joke.id}"' in response.text

    def test_empty_store(self, client):
        response = client.get("/jokes")

        assert response.status_code == 200
        assert "There are no jokes to display." in response.text

    def test_list_is_capped(self, client, db, kody):
        for i in range(JOKE_LIST_LIMIT + 3):
            JokeService.create_joke(
                db, jokester_id=kody.id, name=f"Pun {i}", content="Some content here"
            )

        response = client.get("/jokes")

        # Sidebar items only; the random joke permalink is not a list item
        assert response.text.count("<li><a href=\"/jokes/") == JOKE_LIST_LIMIT

    def test_header_greets_signed_in_user(self, client, kody, login_as):
        login_as(kody)

        response = client.get("/jokes")

        assert "Hi kody" in response.text
        assert 'action="/logout"' in response.text

    def test_header_offers_login_when_anonymous(self, client):
        response = client.get("/jokes")

        assert 'href="/login"' in response.text
        assert 'action="/logout"' not in response.text


class TestRandomJoke:
    """Tests for GET /jokes/random."""

    def test_redirects_to_a_joke(self, client, joke):
        response = client.get("/jokes/random")

        assert response.status_code == 302
        assert response.headers["location"] == f"/jokes/{joke.id}"

    def test_empty_store(self, client):
        response = client.get("/jokes/random")

        assert response.status_code == 404
        assert "There are no jokes to display." in response.text


# =============================================================================
# GET /jokes/{joke_id}
# =============================================================================

class TestJokeDetail:
    """Tests for the joke detail page."""

    def test_anyone_can_read(self, client, joke):
        response = client.get(f"/jokes/{joke.id}")

        assert response.status_code == 200
        assert joke.content in response.text
        assert 'id="delete-joke-form"' not in response.text

    def test_owner_sees_delete_button(self, client, joke, kody, login_as):
        login_as(kody)

        response = client.get(f"/jokes/{joke.id}")

        assert response.status_code == 200
        assert 'id="delete-joke-form"' in response.text
        assert 'name="_method" value="delete"' in response.text

    def test_non_owner_sees_no_delete_button(self, client, joke, other_user, login_as):
        login_as(other_user)

        response = client.get(f"/jokes/{joke.id}")

        assert response.status_code == 200
        assert 'id="delete-joke-form"' not in response.text

    def test_missing_joke(self, client):
        response = client.get("/jokes/no-such-joke")

        assert response.status_code == 404
        assert "What the heck is" in response.text
        assert "no-such-joke" in response.text

    def test_cookie_for_deleted_user_is_anonymous(self, client, joke, login_as):
        login_as(User(id="ghost-user-id", username="ghost", password_hash="x"))

        response = client.get(f"/jokes/{joke.id}")

        assert response.status_code == 200
        assert "Hi ghost" not in response.text


# =============================================================================
# POST /jokes/{joke_id}
# =============================================================================

class TestDeleteJoke:
    """Tests for deleting a joke with _method=delete."""

    def test_owner_deletes(self, client, joke, kody, login_as, joke_exists):
        # Arrange: Sign in as the jokester
        login_as(kody)

        # Act: Submit the delete form
        response = client.post(f"/jokes/{joke.id}", data={"_method": "delete"})

        # Assert: Redirected to the index and the joke is gone
        assert response.status_code == 302
        assert response.headers["location"] == "/jokes"
        assert not joke_exists(joke.id)
        assert client.get(f"/jokes/{joke.id}").status_code == 404

    def test_non_owner_is_refused(self, client, joke, other_user, login_as, joke_exists):
        login_as(other_user)

        response = client.post(f"/jokes/{joke.id}", data={"_method": "delete"})

        assert response.status_code == 401
        assert f"Sorry, but {joke.id} is not your joke." in response.text
        assert joke_exists(joke.id)

    def test_anonymous_is_sent_to_login(self, client, joke, joke_exists):
        response = client.post(f"/jokes/{joke.id}", data={"_method": "delete"})

        assert response.status_code == 302
        assert response.headers["location"] == login_redirect(f"/jokes/{joke.id}")
        assert joke_exists(joke.id)

    def test_unsupported_method(self, client, joke, kody, login_as, joke_exists):
        login_as(kody)

        response = client.post(f"/jokes/{joke.id}", data={"_method": "put"})

        assert response.status_code == 400
        assert "trying to do is not allowed." in response.text
        assert joke_exists(joke.id)

    def test_unsupported_method_when_anonymous(self, client, joke, joke_exists):
        response = client.post(f"/jokes/{joke.id}", data={"_method": "put"})

        assert response.status_code == 400
        assert joke_exists(joke.id)

    def test_missing_method(self, client, joke, kody, login_as, joke_exists):
        login_as(kody)

        response = client.post(f"/jokes/{joke.id}", data={})

        assert response.status_code == 400
        assert joke_exists(joke.id)

    def test_extra_field(self, client, joke, kody, login_as, joke_exists):
        login_as(kody)

        response = client.post(
            f"/jokes/{joke.id}", data={"_method": "delete", "force": "yes"}
        )

        assert response.status_code == 400
        assert joke_exists(joke.id)

    def test_missing_joke(self, client, kody, login_as):
        login_as(kody)

        response = client.post("/jokes/no-such-joke", data={"_method": "delete"})

        assert response.status_code == 404
        assert "no-such-joke" in response.text


# =============================================================================
# /jokes/new
# =============================================================================

class TestNewJoke:
    """Tests for the new joke form."""

    def test_page_requires_login(self, client):
        response = client.get("/jokes/new")

        assert response.status_code == 302
        assert response.headers["location"] == login_redirect("/jokes/new")

    def test_page_renders_for_user(self, client, kody, login_as):
        login_as(kody)

        response = client.get("/jokes/new")

        assert response.status_code == 200
        assert "Add your own hilarious joke" in response.text

    def test_create(self, client, kody, login_as, count_jokes):
        login_as(kody)

        response = client.post(
            "/jokes/new",
            data={"name": "Elevator", "content": "It was an uplifting experience."},
        )

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith("/jokes/")
        assert count_jokes() == 1

        detail = client.get(location)
        assert "It was an uplifting experience." in detail.text
        assert 'id="delete-joke-form"' in detail.text

    def test_create_requires_login(self, client, count_jokes):
        response = client.post(
            "/jokes/new",
            data={"name": "Elevator", "content": "It was an uplifting experience."},
        )

        assert response.status_code == 302
        assert response.headers["location"] == login_redirect("/jokes/new")
        assert count_jokes() == 0

    def test_create_with_cookie_for_deleted_user(self, client, login_as, count_jokes):
        """A valid session for a user that no longer exists cannot post jokes."""
        # Arrange: Signed cookie for a user id with no row behind it
        login_as(User(id="ghost-user-id", username="ghost", password_hash="x"))

        # Act: Submit an otherwise valid joke
        response = client.post(
            "/jokes/new",
            data={"name": "Orphan", "content": "Nobody owns this joke at all."},
        )

        # Assert: Sent to log in again and nothing was stored
        assert response.status_code == 302
        assert response.headers["location"] == login_redirect("/jokes/new")
        assert count_jokes() == 0

    def test_page_with_cookie_for_deleted_user(self, client, login_as):
        login_as(User(id="ghost-user-id", username="ghost", password_hash="x"))

        response = client.get("/jokes/new")

        assert response.status_code == 302
        assert response.headers["location"] == login_redirect("/jokes/new")

    def test_validation_errors(self, client, kody, login_as, count_jokes):
        login_as(kody)

        response = client.post("/jokes/new", data={"name": "Hi", "content": "Short"})

        assert response.status_code == 400
        assert "name is too short" in response.text
        assert "That joke is too short" in response.text
        assert count_jokes() == 0

    def test_malformed_form(self, client, kody, login_as, count_jokes):
        login_as(kody)

        response = client.post("/jokes/new", data={"name": "Elevator"})

        assert response.status_code == 400
        assert "Form not submitted correctly." in response.text
        assert count_jokes() == 0
