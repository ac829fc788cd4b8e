"""Host adapters driving the replay engine."""
