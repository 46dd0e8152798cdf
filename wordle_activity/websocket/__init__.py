"""
WebSocket Package

Real-time notifications over Socket.IO.
"""

from .handlers import register_websocket_handlers

__all__ = ['register_websocket_handlers']
