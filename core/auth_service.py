# core/auth_service.py
from core.api_client import ApiClient
from core.errors import ApiError
from core.session_manager import AdminSession
from models.admin import Admin

def login(api: ApiClient, email: str, password: str):
    """
    Log in against POST /auth/login.
    Return (session, message). session is None when the login failed;
    message is helpful for UI.
    """
    if not email or not password:
        return None, "Email and password are required."

    try:
        data = api.post("/auth/login", json={"email": email, "password": password}, auth=False)
    except ApiError as e:
        return None, e.message or "Login failed"

    token = (data or {}).get("token")
    if not token:
        return None, "Login failed: no token returned"

    admin = Admin.from_dict(data.get("admin") or {"email": email})
    session = AdminSession(token, admin)
    api.session = session
    return session, data.get("message") or "Login successful."

def get_current_admin(api: ApiClient) -> Admin:
    """GET /auth/me for the admin behind the current token (raises ApiError)."""
    return Admin.from_dict(api.get("/auth/me") or {})

def logout(api: ApiClient):
    """End the client's session; the server keeps no logout state."""
    if api.session is not None:
        api.session.end()
    api.close()
