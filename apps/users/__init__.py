"""Users app package.

Users are the people sharing items. The booking domain only needs to know
whether a user exists; profile management lives outside this project.
"""
