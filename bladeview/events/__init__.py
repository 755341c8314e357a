"""
Events Package
"""
from bladeview.events.dispatcher import Dispatcher

__all__ = ['Dispatcher']
