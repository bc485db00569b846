"""Version 1 endpoints: health, sampling review and session agents."""
