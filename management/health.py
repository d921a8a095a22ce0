from .endpoints import endpoint


@endpoint("health")
def health_check():
    """
    Health endpoint polled by the admin server.
    Nothing here depends on external services, so it always reports UP.
    """
    return {"status": "UP"}
