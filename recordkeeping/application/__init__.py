"""Application layer: orchestration services and result DTOs."""
