"""Operation backend with transactional notification fan-out."""
