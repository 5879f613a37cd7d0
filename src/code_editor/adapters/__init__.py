"""Host adapters that drive the editor core from a UI toolkit."""
