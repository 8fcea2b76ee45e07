# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for the pokemon resource
# - services/: In-memory pokemon store and seed loading
#
# Route handling stays in app/; code here works on plain models.
# This keeps the logic testable without an HTTP client.
# =============================================================================
