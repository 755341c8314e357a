"""
View Package
Finder, compiler, engines and the view factory
"""
from bladeview.view.factory import Factory
from bladeview.view.finder import FileViewFinder
from bladeview.view.view import View
from bladeview.view.view_name import ViewName

__all__ = [
    'Factory',
    'FileViewFinder',
    'View',
    'ViewName',
]
