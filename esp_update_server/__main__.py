import uvicorn

from .config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run("esp_update_server.main:app", host=HOST, port=PORT)
