"""Route Modules: reference documentation and the catch-all dispatch route."""
