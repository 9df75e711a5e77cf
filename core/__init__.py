# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routes:
# - models/: Pydantic schemas for forms and views
# - services/: JokeService and UserService (queries and rules)
#
# Services raise the app's exceptions but never build responses.
# =============================================================================
