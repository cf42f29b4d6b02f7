"""
Shared constants for admin panel components
"""

# ===== RESPONSIVE LAYOUT CONSTANTS =====
BREAKPOINT = 800  # Mobile vs Desktop threshold (px)

# Grid settings for desktop
DESKTOP_COLUMNS = 3

# Card minimum heights (auto-expand if content is longer)
USER_CARD_MIN_HEIGHT = 140

# Grid spacing
GRID_SPACING = 10
GRID_RUN_SPACING = 10

# ===== BRAND COLORS =====
PRIMARY = "#2563EB"

# Dashboard tiles: (title, stat attribute, color, icon)
STAT_TILES = [
    ("Total Users", "total_users", "blue500", "👥"),
    ("Total Products", "total_products", "green500", "🍔"),
    ("Total Orders", "total_orders", "amber500", "📦"),
    ("Total Revenue", "total_revenue", "purple500", "💰"),
]
