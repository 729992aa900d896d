"""Generation provider clients."""
