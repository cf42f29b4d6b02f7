from core.api_client import ApiClient
from core.errors import ApiError, FetchError
from models.dashboard import DashboardStats

def get_dashboard_stats(api: ApiClient) -> DashboardStats:
    """
    Get overall dashboard summary stats
    Raises FetchError so the view can offer a retry
    """
    try:
        data = api.get("/dashboard")
    except ApiError as e:
        raise FetchError(e.message, e.status_code) from e
    return DashboardStats.from_dict(data or {})

def chart_series(stats: DashboardStats):
    """Labels and values for the counts bar chart."""
    return (
        ["Users", "Products", "Orders"],
        [stats.total_users, stats.total_products, stats.total_orders],
    )
