"""
auth — User authentication module.

Provides:
  • Signed bearer token creation & verification (``TokenService``)
  • Password hashing (bcrypt)
  • ``get_current_user_id`` FastAPI dependency (the access guard)
"""
