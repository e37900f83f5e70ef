"""Postboard — posts and comments backend with token-based auth.

Users register and log in for an access/refresh token pair, then create
posts and comments they alone may edit or delete. Refresh tokens are
single-use and revocable; replaying one logs the user out everywhere.
"""

__version__ = "0.1.0"
