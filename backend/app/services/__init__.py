"""Services Layer — orchestration between API routes and infrastructure clients."""
