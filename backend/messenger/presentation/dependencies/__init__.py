"""FastAPI dependencies shared by routers."""
