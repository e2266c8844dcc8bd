"""Terminal UI for paneldash."""
