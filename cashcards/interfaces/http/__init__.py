"""HTTP interface: routers and dependency providers."""
