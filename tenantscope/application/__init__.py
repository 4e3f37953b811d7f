"""Application layer: tenancy services. Depends on domain and core only."""
