"""Services Layer - orchestration of load/save and the form lifecycle."""
