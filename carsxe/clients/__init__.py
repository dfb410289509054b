"""HTTP transports used by the CarsXE clients."""
