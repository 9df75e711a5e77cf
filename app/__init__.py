# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, logging setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Cookie sessions, login and logout
# - routers/: Page endpoints organized by feature
# - templates/: Jinja2 pages
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
