"""Host adapters wiring the engine to concrete terminal toolkits."""
