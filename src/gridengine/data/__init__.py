"""Row storage, lifecycle rules and history snapshots."""
