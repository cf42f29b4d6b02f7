# core/user_service.py
from core.api_client import ApiClient, fetch_all
from core.errors import ApiError
from models.user import User

def get_all_users(api: ApiClient):
    """Get all users (raises FetchError)"""
    return fetch_all(api, "/users", User.from_dict)

def create_user(api: ApiClient, name: str, email: str, mobile: str = ""):
    """
    Create a user
    Returns (user or None, message)
    """
    try:
        data = api.post("/users", json={"name": name, "email": email, "mobile": mobile})
        return User.from_dict(data or {}), "User created successfully"
    except ApiError as e:
        return None, e.message or "Failed to save user"

def update_user(api: ApiClient, user_id: str, name: str = None, email: str = None, mobile: str = None):
    """
    Update only the fields that were given
    Returns (success: bool, message: str)
    """
    payload = {}
    if name is not None:
        payload["name"] = name
    if email is not None:
        payload["email"] = email
    if mobile is not None:
        payload["mobile"] = mobile

    if not payload:
        return False, "Nothing to update"

    try:
        api.put(f"/users/{user_id}", json=payload)
        return True, "User updated successfully"
    except ApiError as e:
        return False, e.message or "Failed to save user"

def delete_user(api: ApiClient, user_id: str):
    """
    Delete a user
    Returns (success: bool, message: str)
    """
    try:
        api.delete(f"/users/{user_id}")
        return True, "User deleted successfully"
    except ApiError as e:
        return False, e.message or "Failed to delete user"
