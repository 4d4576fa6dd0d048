"""Application layer: use cases, validation services, DTOs and ports."""
