"""Zeus Orchestrator HTTP service package."""
