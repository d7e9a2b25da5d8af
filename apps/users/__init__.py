"""Users app package.

Marketplace members (guests and hosts) and the identity resolver that
maps a claimed user id onto a member. There is no login: the demo
resolver trusts the id it is given, see ``apps.users.identity``.
"""
