"""Multi-species Gray-Scott reaction-diffusion on a periodic lattice."""
