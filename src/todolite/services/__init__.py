"""Service layer: business logic between the UI/commands and storage."""
