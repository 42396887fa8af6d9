"""Application layer – slug decision, generation and de-duplication."""
