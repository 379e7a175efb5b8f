"""Host adapters for running a navigator against real widgets and keyboards."""
