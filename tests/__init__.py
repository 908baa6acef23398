# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the TodoList API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_utils.py: UUID helpers
# - test_config.py: Settings defaults and computed properties
# - test_store.py: In-memory user store
# - test_services.py: User and todo business logic
# - test_dependencies.py: Per-route request checks
# - test_users_api.py / test_todos_api.py: Endpoint tests
# - test_scenarios.py: End-to-end flows
#
# Run tests with: pytest
# =============================================================================
