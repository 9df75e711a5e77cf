# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the jokes app:
# - test_models.py: Unit tests for form and view model validation
# - test_session.py: Tests for signed session tokens
# - test_services.py: Tests for JokeService and UserService
# - test_auth_routes.py: Integration tests for login, register and logout
# - test_joke_routes.py: Integration tests for the joke pages
# - test_app.py: Home page, health checks and the error boundary
# - test_scripts.py: The server runner script
#
# Run tests with: pytest
# =============================================================================
