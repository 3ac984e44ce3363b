"""HTTP interface: routers, dependency providers and error mapping."""
