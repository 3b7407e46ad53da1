"""Infrastructure: logging, client factory loading and outbound HTTP."""
