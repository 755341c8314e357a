"""
View name normalization
"""
from bladeview.defaults import HINT_PATH_DELIMITER


class ViewName:
    """Canonical form of view identifiers ('admin/users' -> 'admin.users')"""

    @staticmethod
    def normalize(name: str) -> str:
        """
        Normalize a view name

        Example:
            ViewName.normalize('admin/users')        # 'admin.users'
            ViewName.normalize('mail::emails/welcome')  # 'mail::emails.welcome'
        """
        if HINT_PATH_DELIMITER not in name:
            return name.replace('/', '.')

        namespace, view = name.split(HINT_PATH_DELIMITER, 1)
        return namespace + HINT_PATH_DELIMITER + view.replace('/', '.')
