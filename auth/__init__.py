"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt)
  • Credential store (signup / credential check)
  • JWT token issuing & verification
  • Signup / Login API routes
  • ``get_current_identity`` FastAPI dependency
"""
