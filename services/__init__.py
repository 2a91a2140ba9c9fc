"""
services/ - Business Logic Layer
=================================
Registration rules and link parsing. Services talk to repositories and
return the text handlers send back to the chat.
"""
