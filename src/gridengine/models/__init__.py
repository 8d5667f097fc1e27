"""Plain data types shared by the engine services."""
