#!/usr/bin/env python3
"""
preview_generator.py - Render a static HTML preview of a generated site

Builds one self-contained document (inline CSS, no external assets) showing:
- Header with industry icon, business name, navigation and CTA
- Hero with name, tagline and location
- Info summary, generated page cards, included features
- Color palette and footer

Input: site configuration dict (businessName, industry, pages, colors, ...)
Output: HTML string

Every field is optional. Missing or malformed values fall back to defaults,
so any config renders a valid document. Caller text is HTML-escaped.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from markupsafe import escape

DEFAULT_BUSINESS_NAME = "My Business"
DEFAULT_INDUSTRY = "business"
DEFAULT_INDUSTRY_NAME = "Business"
DEFAULT_PAGES = ["Home", "About", "Services", "Contact"]
DEFAULT_COLORS = {
    "primary": "#3b82f6",
    "secondary": "#1e40af",
    "accent": "#f59e0b",
    "text": "#1a1a2e",
    "background": "#ffffff",
}
PAGE_CARD_CAPTION = "AI-generated content with industry-specific sections"

INDUSTRY_ICONS = {
    "restaurant": "🍽️",
    "pizzeria": "🍕",
    "cafe": "☕",
    "bakery": "🥐",
    "bar": "🍸",
    "food-truck": "🚚",
    "healthcare": "🏥",
    "dental": "🦷",
    "fitness": "💪",
    "spa-salon": "💆",
    "real-estate": "🏠",
    "law-firm": "⚖️",
    "ecommerce": "🛒",
    "retail": "🏪",
    "photography": "📸",
    "construction": "🏗️",
    "automotive": "🚗",
    "education": "📚",
}
DEFAULT_INDUSTRY_ICON = "🏢"

PAGE_ICONS = {
    "home": "🏠",
    "about": "ℹ️",
    "services": "⚙️",
    "contact": "📧",
    "menu": "📋",
    "gallery": "🖼️",
    "team": "👥",
    "pricing": "💰",
    "faq": "❓",
    "blog": "📝",
    "testimonials": "⭐",
    "portfolio": "📁",
    "products": "📦",
    "booking": "📅",
    "reservations": "🗓️",
}
DEFAULT_PAGE_ICON = "📄"

INDUSTRY_FEATURES = {
    "restaurant": [
        ("📋", "Online Menu"),
        ("📅", "Reservations"),
        ("🛒", "Online Ordering"),
        ("📍", "Location & Hours"),
        ("⭐", "Reviews Section"),
        ("📸", "Photo Gallery"),
    ],
    "pizzeria": [
        ("🍕", "Pizza Menu Builder"),
        ("🛒", "Online Ordering"),
        ("🚗", "Delivery Tracking"),
        ("💰", "Deals & Specials"),
        ("📞", "Quick Order Phone"),
        ("📍", "Store Locator"),
    ],
    "healthcare": [
        ("📅", "Appointment Booking"),
        ("👨‍⚕️", "Provider Directory"),
        ("🏥", "Services Overview"),
        ("📋", "Patient Portal"),
        ("📞", "Contact Forms"),
        ("🗺️", "Location Maps"),
    ],
    "real-estate": [
        ("🏠", "Property Listings"),
        ("🔍", "Search & Filter"),
        ("👤", "Agent Profiles"),
        ("📅", "Showing Scheduler"),
        ("💰", "Mortgage Calculator"),
        ("📧", "Lead Capture"),
    ],
    "ecommerce": [
        ("🛒", "Shopping Cart"),
        ("💳", "Secure Checkout"),
        ("📦", "Product Catalog"),
        ("🔍", "Search & Filter"),
        ("⭐", "Product Reviews"),
        ("❤️", "Wishlist"),
    ],
    "spa-salon": [
        ("📅", "Online Booking"),
        ("💆", "Services Menu"),
        ("👤", "Staff Profiles"),
        ("💳", "Gift Cards"),
        ("📸", "Gallery"),
        ("⭐", "Testimonials"),
    ],
    "law-firm": [
        ("⚖️", "Practice Areas"),
        ("👨‍💼", "Attorney Profiles"),
        ("📋", "Case Studies"),
        ("📞", "Free Consultation"),
        ("📚", "Legal Resources"),
        ("🏆", "Awards & Recognition"),
    ],
    "fitness": [
        ("📅", "Class Schedule"),
        ("👤", "Trainer Profiles"),
        ("💪", "Programs"),
        ("💳", "Membership Plans"),
        ("📸", "Facility Tour"),
        ("📱", "Mobile App Link"),
    ],
}
DEFAULT_FEATURES = [
    ("📱", "Mobile Responsive"),
    ("🎨", "Custom Design"),
    ("📧", "Contact Form"),
    ("📍", "Location Map"),
    ("📱", "Social Links"),
    ("🔍", "SEO Optimized"),
]

PORTAL_TYPES = {
    "restaurant": "Account",
    "pizzeria": "Account",
    "cafe": "Account",
    "bakery": "Account",
    "healthcare": "Patient",
    "dental": "Patient",
    "medical": "Patient",
    "law-firm": "Client",
    "legal": "Client",
    "accounting": "Client",
    "insurance": "Policy",
    "real-estate": "Client",
    "fitness": "Member",
    "gym": "Member",
    "spa-salon": "Client",
    "salon": "Client",
    "consulting": "Client",
    "construction": "Project",
    "automotive": "Service",
    "pet-services": "Pet",
}
DEFAULT_PORTAL_TYPE = "Account"

# Feature flags that turn on the customer portal dropdown
PORTAL_FLAGS = ("portal", "auth")

_WORD_START = re.compile(r"\b\w")
# Accepted palette values: hex, named, rgb()/hsl()
_CSS_COLOR = re.compile(r"(#[0-9a-fA-F]{3,8}|[a-zA-Z]+|(rgb|rgba|hsl|hsla)\([0-9.,%\s]+\))")

CSS = """
    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', sans-serif;
      background: linear-gradient(135deg, #0f172a 0%, #1e293b 100%);
      min-height: 100vh;
      color: #e2e8f0;
    }

    /* Preview Banner */
    .preview-banner {
      background: linear-gradient(90deg, var(--primary), var(--secondary));
      color: white;
      padding: 12px 24px;
      font-size: 14px;
      font-weight: 500;
      position: sticky;
      top: 0;
      z-index: 100;
      display: flex;
      align-items: center;
      justify-content: center;
      gap: 12px;
    }
    .preview-badge {
      background: rgba(255,255,255,0.2);
      padding: 4px 12px;
      border-radius: 20px;
      font-size: 12px;
      font-weight: 600;
      letter-spacing: 0.5px;
    }

    .preview-container { max-width: 1200px; margin: 0 auto; padding: 40px 24px; }

    /* Header */
    .site-header-preview {
      background: var(--background);
      border-radius: 16px 16px 0 0;
      padding: 0 16px;
      height: 70px;
      display: flex;
      justify-content: space-between;
      align-items: center;
      border-bottom: 1px solid rgba(0,0,0,0.1);
      position: relative;
    }
    .brand { display: flex; align-items: center; gap: 10px; text-decoration: none; }
    .brand-icon { font-size: 28px; }
    .brand-name { font-size: 20px; font-weight: 700; color: var(--primary); white-space: nowrap; }

    .nav-links { display: none; align-items: center; gap: 8px; }
    .nav-link {
      color: var(--text);
      text-decoration: none;
      font-size: 14px;
      font-weight: 500;
      padding: 8px 14px;
      border-radius: 8px;
      opacity: 0.75;
      transition: all 0.2s;
    }
    .nav-link:hover { opacity: 1; background: rgba(0,0,0,0.05); }
    .header-right { display: none; align-items: center; gap: 12px; }
    @media (min-width: 769px) {
      .nav-links, .header-right { display: flex; }
      .mobile-menu-btn { display: none; }
    }

    .cta-button {
      background: var(--primary);
      color: white;
      padding: 8px 18px;
      border-radius: 8px;
      text-decoration: none;
      font-weight: 600;
      font-size: 13px;
    }
    .cta-button:hover { filter: brightness(1.1); }

    /* Portal Dropdown */
    .portal-dropdown { position: relative; }
    .portal-trigger {
      display: flex;
      align-items: center;
      gap: 8px;
      padding: 6px 12px 6px 6px;
      background: #f3f4f6;
      border: 1px solid #e5e7eb;
      border-radius: 100px;
      cursor: pointer;
      font-size: 14px;
      font-weight: 500;
      color: #374151;
    }
    .portal-avatar {
      width: 28px;
      height: 28px;
      background: var(--primary);
      color: white;
      border-radius: 50%;
      display: flex;
      align-items: center;
      justify-content: center;
      font-size: 12px;
      font-weight: 600;
    }
    .portal-arrow { font-size: 10px; color: #6b7280; transition: transform 0.2s; }
    .portal-dropdown:hover .portal-arrow { transform: rotate(180deg); }
    .portal-dropdown-menu {
      position: absolute;
      top: calc(100% + 8px);
      right: 0;
      width: 220px;
      background: white;
      border: 1px solid #e5e7eb;
      border-radius: 12px;
      box-shadow: 0 10px 40px rgba(0,0,0,0.12);
      opacity: 0;
      visibility: hidden;
      transform: translateY(-8px);
      transition: all 0.2s;
      z-index: 100;
      overflow: hidden;
    }
    .portal-dropdown:hover .portal-dropdown-menu { opacity: 1; visibility: visible; transform: translateY(0); }
    .portal-dropdown-header {
      padding: 12px 16px;
      background: linear-gradient(135deg, var(--primary), var(--secondary));
      color: white;
    }
    .portal-dropdown-header-title { font-size: 14px; font-weight: 600; }
    .portal-dropdown-header-sub { font-size: 11px; opacity: 0.85; }
    .portal-dropdown-item {
      display: flex;
      align-items: center;
      gap: 10px;
      padding: 10px 16px;
      color: #374151;
      text-decoration: none;
      font-size: 13px;
    }
    .portal-dropdown-item:hover { background: #f9fafb; }

    /* Mobile Menu */
    .mobile-menu-btn {
      display: flex;
      flex-direction: column;
      justify-content: center;
      gap: 5px;
      width: 40px;
      height: 40px;
      padding: 8px;
      background: none;
      border: none;
      cursor: pointer;
    }
    .hamburger-line { display: block; width: 22px; height: 2px; background: #374151; border-radius: 2px; }
    .mobile-menu-overlay {
      display: none;
      position: fixed;
      inset: 0;
      background: rgba(0,0,0,0.5);
      z-index: 200;
    }
    .mobile-menu-overlay.active { display: block; }
    .mobile-menu {
      position: absolute;
      top: 0;
      right: 0;
      width: 280px;
      max-width: 85vw;
      height: 100%;
      background: white;
      padding: 20px 0;
      overflow-y: auto;
    }
    .mobile-menu-header {
      display: flex;
      align-items: center;
      justify-content: space-between;
      padding: 0 16px 16px;
      border-bottom: 1px solid #e5e7eb;
      margin-bottom: 8px;
    }
    .mobile-close {
      width: 32px;
      height: 32px;
      background: #f3f4f6;
      border: none;
      border-radius: 50%;
      font-size: 18px;
      color: #6b7280;
      cursor: pointer;
    }
    .mobile-section-label {
      padding: 8px 16px;
      font-size: 11px;
      font-weight: 600;
      color: #9ca3af;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }
    .mobile-nav-link {
      display: flex;
      align-items: center;
      gap: 12px;
      padding: 12px 16px;
      color: #374151;
      text-decoration: none;
      font-size: 15px;
      font-weight: 500;
    }
    .mobile-nav-link:hover { background: #f3f4f6; }
    .mobile-portal-section { background: #f9fafb; margin-top: 8px; padding-top: 8px; border-top: 1px solid #e5e7eb; }

    /* Hero */
    .hero-preview {
      background: linear-gradient(135deg, var(--primary) 0%, var(--secondary) 100%);
      padding: 80px 40px;
      text-align: center;
    }
    .hero-title {
      font-size: 48px;
      font-weight: 800;
      color: white;
      margin-bottom: 16px;
      text-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }
    .hero-tagline { font-size: 20px; color: rgba(255,255,255,0.9); max-width: 600px; margin: 0 auto 24px; }
    .hero-location {
      display: inline-flex;
      align-items: center;
      gap: 8px;
      background: rgba(255,255,255,0.15);
      padding: 8px 16px;
      border-radius: 20px;
      font-size: 14px;
      color: rgba(255,255,255,0.9);
    }

    /* Content */
    .content-preview { background: var(--background); padding: 60px 40px; border-radius: 0 0 16px 16px; }
    .info-section { background: #f8fafc; border-radius: 12px; padding: 32px; margin-bottom: 40px; }
    .info-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 24px; }
    .info-item { text-align: center; }
    .info-label {
      font-size: 12px;
      color: var(--muted);
      text-transform: uppercase;
      letter-spacing: 1px;
      margin-bottom: 8px;
    }
    .info-value { font-size: 18px; font-weight: 600; color: var(--text); }

    .section-title { font-size: 24px; font-weight: 700; color: var(--text); margin-bottom: 8px; }
    .section-subtitle { color: var(--muted); margin-bottom: 32px; }

    .pages-grid {
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(180px, 1fr));
      gap: 20px;
      margin-bottom: 40px;
    }
    .page-card {
      background: #f8fafc;
      border-radius: 12px;
      padding: 24px;
      text-align: center;
      border: 2px solid transparent;
      transition: all 0.3s ease;
      animation: fadeInUp 0.5s ease forwards;
      opacity: 0;
    }
    .page-card:hover { border-color: var(--primary); transform: translateY(-4px); box-shadow: 0 8px 24px rgba(0,0,0,0.1); }
    @keyframes fadeInUp {
      from { opacity: 0; transform: translateY(20px); }
      to { opacity: 1; transform: translateY(0); }
    }
    .page-icon { font-size: 32px; margin-bottom: 12px; }
    .page-title { font-size: 16px; font-weight: 600; color: var(--text); margin-bottom: 8px; }
    .page-desc { font-size: 12px; color: var(--muted); }

    .features-section {
      background: linear-gradient(135deg, rgba(59, 130, 246, 0.05) 0%, rgba(139, 92, 246, 0.05) 100%);
      border-radius: 12px;
      padding: 32px;
    }
    .features-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); gap: 16px; }
    .feature-item {
      display: flex;
      align-items: center;
      gap: 12px;
      padding: 12px 16px;
      background: white;
      border-radius: 8px;
      box-shadow: 0 2px 4px rgba(0,0,0,0.05);
    }
    .feature-icon { font-size: 20px; }
    .feature-text { font-size: 14px; color: var(--text); font-weight: 500; }

    .colors-section { margin-top: 40px; }
    .colors-grid { display: flex; gap: 16px; flex-wrap: wrap; }
    .color-swatch { display: flex; flex-direction: column; align-items: center; gap: 8px; }
    .color-circle {
      width: 60px;
      height: 60px;
      border-radius: 50%;
      border: 3px solid white;
      box-shadow: 0 4px 12px rgba(0,0,0,0.15);
    }
    .color-label { font-size: 12px; color: var(--muted); text-transform: capitalize; }

    /* Footer */
    .footer-preview {
      background: var(--primary);
      color: rgba(255,255,255,0.8);
      padding: 24px;
      text-align: center;
      font-size: 14px;
      border-radius: 0 0 16px 16px;
      margin-top: -16px;
    }

    @media (max-width: 768px) {
      .hero-title { font-size: 32px; }
      .pages-grid { grid-template-columns: repeat(2, 1fr); }
    }
"""


def _text(value: Any, default: str) -> str:
    """Non-empty string or the default."""
    if isinstance(value, str) and value.strip():
        return value
    return default


def _str_list(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if not isinstance(value, (list, tuple)):
        return list(default)
    return [str(v) for v in value if v is not None]


def _color(value: Any, default: str) -> str:
    value = _text(value, default).strip()
    return value if _CSS_COLOR.fullmatch(value) else default


def resolve_colors(colors: Any) -> Dict[str, str]:
    """Fill every missing or invalid palette entry with its own default."""
    colors = colors if isinstance(colors, dict) else {}
    return {
        name: _color(colors.get(name), default) for name, default in DEFAULT_COLORS.items()
    }


def page_label(page: str) -> str:
    """Page slug -> nav label ("our-team" -> "Our Team")."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), page.replace("-", " "))


def get_industry_icon(industry: str) -> str:
    return INDUSTRY_ICONS.get(industry, DEFAULT_INDUSTRY_ICON)


def get_page_icon(page: str) -> str:
    return PAGE_ICONS.get(page.lower(), DEFAULT_PAGE_ICON)


def get_industry_features(industry: str) -> List[Dict[str, str]]:
    """Six "included features" for the industry (generic set when unknown)."""
    features = INDUSTRY_FEATURES.get(industry, DEFAULT_FEATURES)
    return [{"icon": icon, "text": text} for icon, text in features]


def get_portal_type(industry: str) -> str:
    """Portal label for the industry ("Patient", "Member", ...)."""
    return PORTAL_TYPES.get(industry, DEFAULT_PORTAL_TYPE)


def get_portal_dropdown_items(industry: str, features: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """Customer portal menu: profile, industry-specific entries, settings."""
    features = features or []
    has_loyalty = "loyalty" in features
    has_ordering = "ordering" in features
    has_appointments = "appointments" in features
    has_reservations = "reservations" in features

    def item(icon, label, href):
        return {"icon": icon, "label": label, "href": href}

    rewards = [item("⭐", "Rewards", "rewards")] if has_loyalty else []

    industry_items = {
        "restaurant": (
            ([item("📦", "My Orders", "orders")] if has_ordering else [])
            + ([item("📅", "Reservations", "reservations")] if has_reservations else [])
            + rewards
            + [item("❤️", "Favorites", "favorites")]
        ),
        "pizzeria": (
            [item("📦", "Order History", "orders")]
            + ([item("⭐", "Rewards Points", "rewards")] if has_loyalty else [])
            + [item("📍", "Saved Addresses", "addresses")]
        ),
        "cafe": (
            [item("📦", "Order History", "orders")]
            + ([item("☕", "Coffee Club", "rewards")] if has_loyalty else [])
        ),
        "healthcare": [
            item("📅", "Appointments", "appointments"),
            item("📋", "Medical Records", "records"),
            item("💊", "Prescriptions", "prescriptions"),
            item("🧪", "Lab Results", "labs"),
            item("💳", "Billing", "billing"),
        ],
        "dental": [
            item("📅", "Appointments", "appointments"),
            item("🦷", "Treatment History", "treatments"),
            item("📄", "Forms", "forms"),
            item("💳", "Billing", "billing"),
        ],
        "law-firm": [
            item("📁", "My Cases", "cases"),
            item("📄", "Documents", "documents"),
            item("💬", "Messages", "messages"),
            item("💳", "Billing", "billing"),
        ],
        "real-estate": [
            item("❤️", "Saved Homes", "saved"),
            item("🔔", "Search Alerts", "alerts"),
            item("📅", "Showings", "showings"),
            item("📄", "Documents", "documents"),
        ],
        "accounting": [
            item("📄", "Tax Returns", "returns"),
            item("📁", "Documents", "documents"),
            item("📊", "Financial Reports", "reports"),
            item("💳", "Invoices", "invoices"),
        ],
        "insurance": [
            item("📋", "My Policies", "policies"),
            item("📝", "Claims", "claims"),
            item("🪪", "ID Cards", "cards"),
            item("💳", "Payments", "payments"),
        ],
        "fitness": [
            item("📅", "Class Schedule", "schedule"),
            item("💳", "Membership", "membership"),
            item("📊", "Progress", "progress"),
        ]
        + ([item("🏆", "Rewards", "rewards")] if has_loyalty else []),
        "spa-salon": [
            item("📅", "Appointments", "appointments"),
            item("📦", "Purchase History", "history"),
        ]
        + rewards,
        "construction": [
            item("🏗️", "My Projects", "projects"),
            item("📄", "Documents", "documents"),
            item("📅", "Schedule", "schedule"),
            item("💳", "Invoices", "invoices"),
        ],
        "automotive": [
            item("🚗", "My Vehicles", "vehicles"),
            item("🔧", "Service History", "history"),
            item("📅", "Appointments", "appointments"),
            item("💳", "Invoices", "invoices"),
        ],
        "pet-services": [
            item("🐕", "My Pets", "pets"),
            item("📅", "Appointments", "appointments"),
            item("📋", "Vaccine Records", "records"),
        ]
        + rewards,
    }

    specific = industry_items.get(industry)
    if specific is None:
        specific = (
            ([item("📦", "Orders", "orders")] if has_ordering else [])
            + ([item("📅", "Appointments", "appointments")] if has_appointments else [])
            + rewards
            + [item("💬", "Messages", "messages")]
        )

    return [item("👤", "My Profile", "profile")] + specific + [item("⚙️", "Settings", "settings")]


def _nav_links(pages: List[str], css_class: str, extra: str = "") -> str:
    links = []
    for page in pages:
        links.append(
            f'<a href="#{escape(page.lower())}" class="{css_class}"{extra}>{escape(page_label(page))}</a>'
        )
    return "\n        ".join(links)


def _page_cards(pages: List[str]) -> str:
    cards = []
    for index, page in enumerate(pages):
        cards.append(f'''
          <div class="page-card" style="animation-delay: {index * 0.1:.1f}s">
            <div class="page-icon">{get_page_icon(page)}</div>
            <h3 class="page-title">{escape(page_label(page))}</h3>
            <p class="page-desc">{PAGE_CARD_CAPTION}</p>
          </div>''')
    return "\n".join(cards)


def _feature_items(industry: str) -> str:
    return "\n".join(
        f'''
          <div class="feature-item">
            <span class="feature-icon">{f["icon"]}</span>
            <span class="feature-text">{escape(f["text"])}</span>
          </div>'''
        for f in get_industry_features(industry)
    )


def _portal_dropdown(portal_type: str, items: List[Dict[str, str]]) -> str:
    links = "\n            ".join(
        f'<a href="#{i["href"]}" class="portal-dropdown-item">{i["icon"]} {i["label"]}</a>'
        for i in items
    )
    return f'''
        <div class="portal-dropdown">
          <button class="portal-trigger">
            <span class="portal-avatar">JD</span>
            <span>My {escape(portal_type)}</span>
            <span class="portal-arrow">▼</span>
          </button>
          <div class="portal-dropdown-menu">
            <div class="portal-dropdown-header">
              <div class="portal-dropdown-header-title">John Demo</div>
              <div class="portal-dropdown-header-sub">{escape(portal_type)} Portal</div>
            </div>
            {links}
            <a href="#logout" class="portal-dropdown-item">🚪 Sign Out</a>
          </div>
        </div>'''


def _color_swatches(colors: Dict[str, str]) -> str:
    swatches = []
    for name in DEFAULT_COLORS:
        border = "; border-color: #e5e7eb;" if name == "background" else ""
        swatches.append(f'''
          <div class="color-swatch">
            <div class="color-circle" style="background: {escape(colors[name])}{border}"></div>
            <span class="color-label">{name.capitalize()}</span>
          </div>''')
    return "".join(swatches)


def generate_preview_html(config: Optional[Dict[str, Any]], year: Optional[int] = None) -> str:
    """Render the full preview document for a site configuration."""
    config = config if isinstance(config, dict) else {}

    business_name = _text(config.get("businessName"), DEFAULT_BUSINESS_NAME)
    industry = _text(config.get("industry"), DEFAULT_INDUSTRY)
    industry_name = _text(config.get("industryName"), DEFAULT_INDUSTRY_NAME)
    pages = _str_list(config.get("pages"), DEFAULT_PAGES)
    colors = resolve_colors(config.get("colors"))
    tagline = _text(config.get("tagline"), "")
    location = _text(config.get("location"), "")
    features = _str_list(config.get("features"), [])
    portal_config = config.get("portalConfig") if isinstance(config.get("portalConfig"), dict) else {}
    year = year or datetime.now().year

    has_portal = any(flag in features for flag in PORTAL_FLAGS)
    portal_type = _text(portal_config.get("type"), get_portal_type(industry))
    portal_items = get_portal_dropdown_items(industry, features) if has_portal else []

    industry_icon = get_industry_icon(industry)
    name = escape(business_name)
    close_menu = " onclick=\"document.getElementById('mobileMenu').classList.remove('active')\""

    tagline_html = (
        f'<p class="hero-tagline">{escape(tagline)}</p>'
        if tagline
        else f'<p class="hero-tagline">Professional {escape(industry_name)} services tailored to your needs</p>'
    )
    location_html = f'<div class="hero-location">📍 {escape(location)}</div>' if location else ""

    mobile_portal_html = ""
    if has_portal:
        mobile_links = "\n          ".join(
            f'<a href="#{i["href"]}" class="mobile-nav-link"{close_menu}>{i["icon"]} {i["label"]}</a>'
            for i in portal_items
        )
        mobile_portal_html = f'''
        <div class="mobile-portal-section">
          <div class="mobile-section-label">My {escape(portal_type)}</div>
          {mobile_links}
        </div>'''

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Preview: {name}</title>
  <style>
    :root {{
      --primary: {escape(colors["primary"])};
      --secondary: {escape(colors["secondary"])};
      --accent: {escape(colors["accent"])};
      --text: {escape(colors["text"])};
      --background: {escape(colors["background"])};
      --muted: #64748b;
    }}
{CSS}
  </style>
</head>
<body>
  <div class="preview-banner">
    <span class="preview-badge">PREVIEW</span>
    <span>This is how your site will look after deployment</span>
  </div>

  <div class="preview-container">
    <header class="site-header-preview">
      <a href="#home" class="brand">
        <span class="brand-icon">{industry_icon}</span>
        <span class="brand-name">{name}</span>
      </a>

      <nav class="nav-links">
        {_nav_links(pages, "nav-link")}
      </nav>

      <div class="header-right">{_portal_dropdown(portal_type, portal_items) if has_portal else ""}
        <a href="#contact" class="cta-button">Contact Us</a>
      </div>

      <button class="mobile-menu-btn" onclick="document.getElementById('mobileMenu').classList.add('active')">
        <span class="hamburger-line"></span>
        <span class="hamburger-line"></span>
        <span class="hamburger-line"></span>
      </button>
    </header>

    <div id="mobileMenu" class="mobile-menu-overlay" onclick="if(event.target === this) this.classList.remove('active')">
      <div class="mobile-menu">
        <div class="mobile-menu-header">
          <span class="brand-name">{name}</span>
          <button class="mobile-close"{close_menu}>✕</button>
        </div>
        <div class="mobile-section-label">Menu</div>
        {_nav_links(pages, "mobile-nav-link", close_menu)}
        {mobile_portal_html}
      </div>
    </div>

    <section class="hero-preview">
      <div class="hero-content">
        <h1 class="hero-title">{name}</h1>
        {tagline_html}
        {location_html}
      </div>
    </section>

    <section class="content-preview">
      <div class="info-section">
        <div class="info-grid">
          <div class="info-item">
            <div class="info-label">Industry</div>
            <div class="info-value">{industry_icon} {escape(industry_name)}</div>
          </div>
          <div class="info-item">
            <div class="info-label">Pages</div>
            <div class="info-value">{len(pages)} Pages</div>
          </div>
          <div class="info-item">
            <div class="info-label">Theme</div>
            <div class="info-value">Custom Colors</div>
          </div>
          <div class="info-item">
            <div class="info-label">Status</div>
            <div class="info-value">✅ Ready to Deploy</div>
          </div>
        </div>
      </div>

      <div class="pages-section">
        <h2 class="section-title">Generated Pages</h2>
        <p class="section-subtitle">Each page includes AI-generated content optimized for {escape(industry_name)}</p>
        <div class="pages-grid">{_page_cards(pages)}
        </div>
      </div>

      <div class="features-section">
        <h2 class="section-title">Included Features</h2>
        <p class="section-subtitle">Built-in functionality for your {escape(industry_name.lower())} website</p>
        <div class="features-grid">{_feature_items(industry)}
        </div>
      </div>

      <div class="colors-section">
        <h2 class="section-title">Color Scheme</h2>
        <p class="section-subtitle">Your site's color palette</p>
        <div class="colors-grid">{_color_swatches(colors)}
        </div>
      </div>
    </section>

    <footer class="footer-preview">
      <p>&copy; {year} {name}. All rights reserved.</p>
    </footer>
  </div>
</body>
</html>'''
