"""Feature packages built on the disc domain model."""
