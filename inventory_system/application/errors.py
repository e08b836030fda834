class StoreNotConfiguredError(RuntimeError):
    """A service was constructed without a database session."""

def require_session(db, service_name: str):
    if db is None:
        raise StoreNotConfiguredError(f"{service_name} requires a database session")
    return db
