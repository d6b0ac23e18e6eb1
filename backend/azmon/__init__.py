"""Azure Monitor query dispatcher."""
