"""Authentication and authorization.

Learn: Users trade username/password for a JWT pair:
1. Access token → short-lived, stateless, sent on every protected call
2. Refresh token → no expiry, valid only while stored on the user

Protected routes resolve the access token to a CurrentIdentity that is
passed explicitly to handlers for ownership checks.
"""
