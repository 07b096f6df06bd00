import uvicorn

from event_registry.settings import app_settings

if __name__ == "__main__":
    uvicorn.run(
        "event_registry.main:create_app",
        factory=True,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=app_settings.debug,
    )
