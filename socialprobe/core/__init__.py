"""Resolution pipeline internals: fetching, parsing, matching, generation."""
