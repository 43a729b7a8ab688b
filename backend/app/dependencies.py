from fastapi import Request, WebSocket

from services import PersistenceGateway, SessionController


def get_controller(request: Request) -> SessionController:
    return request.app.state.controller


def get_gateway(request: Request) -> PersistenceGateway:
    return request.app.state.gateway


def get_ws_controller(websocket: WebSocket) -> SessionController:
    return websocket.app.state.controller
