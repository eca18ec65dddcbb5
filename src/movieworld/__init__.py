"""MovieWorld: movie catalogue microservice."""
