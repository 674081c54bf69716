# -*- coding: utf-8 -*-
"""
module_catalog.py
Static manifest of reusable modules and bundles for the module library.

- MODULES: module name -> source platform, type and file list
  (files[i] in the platform checkout is copied to outputFiles[i] in the library)
- BUNDLES: bundle name -> ordered module names
- PLATFORMS: platform key -> checkout directory name (resolved by Config.platform_paths)
"""

from typing import Dict, List

MODULE_TYPES = ("backend", "frontend")

PLATFORMS: Dict[str, str] = {
    "slabtrack": "slabtrack",
    "huddle": "Huddle",
    "healthcareos": "HealthcareOS",
    "family-huddle": "My-Family-Huddle",
    "ubg": "universal-business-generator",
    "campuswager": "CampusWager",
    "financial": "Financial-Services-Platform",
    "be1st": "be1st",
}

MODULES: Dict[str, dict] = {
    # BACKEND MODULES
    "auth": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/auth.routes.js",
            "backend/middleware/auth.js",
            "backend/models/User.js",
            "backend/services/password-reset-email.js",
        ],
        "outputFiles": [
            "routes/auth.js",
            "middleware/auth.js",
            "models/User.js",
            "services/password-reset.js",
        ],
    },
    "stripe-payments": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/stripe.routes.js",
            "backend/routes/subscription.routes.js",
            "backend/services/stripe-service.js",
            "backend/config/plans.js",
        ],
        "outputFiles": [
            "routes/stripe.js",
            "routes/subscription.js",
            "services/stripe.js",
            "config/plans.js",
        ],
    },
    "notifications": {
        "type": "backend",
        "bestSource": "huddle",
        "files": [
            "backend/routes/notifications.js",
            "backend/services/notificationService.js",
            "backend/services/email.service.js",
            "backend/models/Notification.js",
        ],
        "outputFiles": [
            "routes/notifications.js",
            "services/notification.js",
            "services/email.js",
            "models/Notification.js",
        ],
    },
    "chat": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/chat.js",
            "backend/routes/messages.js",
        ],
        "outputFiles": [
            "routes/chat.js",
            "routes/messages.js",
        ],
    },
    "booking": {
        "type": "backend",
        "bestSource": "healthcareos",
        "files": [
            "backend/routes/appointments.js",
            "backend/routes/services.js",
        ],
        "outputFiles": [
            "routes/booking.js",
            "routes/services.js",
        ],
    },
    "admin-dashboard": {
        "type": "backend",
        "bestSource": "healthcareos",
        "files": [
            "backend/routes/admin.js",
        ],
        "outputFiles": [
            "routes/admin.js",
        ],
    },
    "analytics": {
        "type": "backend",
        "bestSource": "healthcareos",
        "files": [
            "backend/routes/analytics.js",
            "backend/routes/metrics.js",
        ],
        "outputFiles": [
            "routes/analytics.js",
            "routes/metrics.js",
        ],
    },
    "ai-scanner": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/scanner.routes.js",
            "backend/services/ai-scanner.js",
            "backend/services/claude-scanner.js",
        ],
        "outputFiles": [
            "routes/scanner.js",
            "services/ai-scanner.js",
            "services/claude-scanner.js",
        ],
    },
    "file-upload": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/middleware/upload.js",
            "backend/services/cloudinary.js",
            "backend/services/imageProcessor.js",
        ],
        "outputFiles": [
            "middleware/upload.js",
            "services/cloudinary.js",
            "services/image-processor.js",
        ],
    },
    "vendor-system": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/vendor.routes.js",
            "backend/routes/vendor-sales-shows.routes.js",
        ],
        "outputFiles": [
            "routes/vendor.js",
            "routes/vendor-sales.js",
        ],
    },
    "collections": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/collections.js",
        ],
        "outputFiles": [
            "routes/collections.js",
        ],
    },
    "showcase": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/showcase.routes.js",
        ],
        "outputFiles": [
            "routes/showcase.js",
        ],
    },
    "transfers": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/transfer.routes.js",
        ],
        "outputFiles": [
            "routes/transfer.js",
        ],
    },
    "nfc-tags": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/nfc.routes.js",
        ],
        "outputFiles": [
            "routes/nfc.js",
        ],
    },
    "ebay-integration": {
        "type": "backend",
        "bestSource": "slabtrack",
        "files": [
            "backend/routes/ebay.routes.js",
            "backend/routes/ebayAuth.js",
            "backend/services/ebay-api.js",
            "backend/services/ebay-oauth.js",
        ],
        "outputFiles": [
            "routes/ebay.js",
            "routes/ebay-auth.js",
            "services/ebay-api.js",
            "services/ebay-oauth.js",
        ],
    },
    "fantasy": {
        "type": "backend",
        "bestSource": "huddle",
        "files": [
            "backend/routes/fantasy/fantasy-leagues.js",
            "backend/routes/fantasy/draft-management.js",
            "backend/services/fantasy/DraftOptimizer.js",
            "backend/services/fantasy/TradeEngine.js",
        ],
        "outputFiles": [
            "routes/fantasy-leagues.js",
            "routes/draft.js",
            "services/draft-optimizer.js",
            "services/trade-engine.js",
        ],
    },
    "betting": {
        "type": "backend",
        "bestSource": "huddle",
        "files": [
            "backend/routes/betting-tools.js",
            "backend/routes/picks.routes.js",
            "backend/routes/sidebets.routes.js",
            "backend/models/Bet.js",
            "backend/models/Pick.js",
        ],
        "outputFiles": [
            "routes/betting.js",
            "routes/picks.js",
            "routes/sidebets.js",
            "models/Bet.js",
            "models/Pick.js",
        ],
    },
    "leaderboard": {
        "type": "backend",
        "bestSource": "huddle",
        "files": [
            "backend/models/Leaderboard.js",
            "backend/routes/reputation.js",
        ],
        "outputFiles": [
            "models/Leaderboard.js",
            "routes/leaderboard.js",
        ],
    },
    # FRONTEND MODULES
    "login-form": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/auth/LoginForm.jsx",
            "frontend/src/pages/Login.jsx",
        ],
        "outputFiles": [
            "components/auth/LoginForm.jsx",
            "pages/Login.jsx",
        ],
    },
    "register-form": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/auth/RegisterForm.jsx",
            "frontend/src/pages/Register.jsx",
        ],
        "outputFiles": [
            "components/auth/RegisterForm.jsx",
            "pages/Register.jsx",
        ],
    },
    "header-nav": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/shared/Navbar.jsx",
        ],
        "outputFiles": [
            "components/layout/Navbar.jsx",
        ],
    },
    "footer-section": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/layout/Footer.jsx",
        ],
        "outputFiles": [
            "components/layout/Footer.jsx",
        ],
    },
    "modal-system": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/shared/Modal.jsx",
        ],
        "outputFiles": [
            "components/ui/Modal.jsx",
        ],
    },
    "stat-cards": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/dashboard/DashboardStats.jsx",
            "frontend/src/components/dashboard/UsageWidget.jsx",
        ],
        "outputFiles": [
            "components/dashboard/StatCards.jsx",
            "components/dashboard/UsageWidget.jsx",
        ],
    },
    "data-table": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/cards/CardGrid.jsx",
        ],
        "outputFiles": [
            "components/data/DataTable.jsx",
        ],
    },
    "collection-grid": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/cards/CardGrid.jsx",
            "frontend/src/pages/CollectionViewer.jsx",
        ],
        "outputFiles": [
            "components/collection/CollectionGrid.jsx",
            "pages/CollectionViewer.jsx",
        ],
    },
    "item-detail": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/cards/CardDetailModal.jsx",
            "frontend/src/components/cards/CardDisplay.jsx",
        ],
        "outputFiles": [
            "components/items/ItemDetailModal.jsx",
            "components/items/ItemDisplay.jsx",
        ],
    },
    "file-uploader": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/components/scanner/ImageUpload.jsx",
            "frontend/src/components/ImageUploadModal.jsx",
        ],
        "outputFiles": [
            "components/upload/ImageUpload.jsx",
            "components/upload/UploadModal.jsx",
        ],
    },
    "checkout-flow": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/pages/CheckoutPage.jsx",
        ],
        "outputFiles": [
            "pages/Checkout.jsx",
        ],
    },
    "pricing-table": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/pages/Pricing.jsx",
        ],
        "outputFiles": [
            "pages/Pricing.jsx",
        ],
    },
    "settings-panel": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/pages/Settings.jsx",
        ],
        "outputFiles": [
            "pages/Settings.jsx",
        ],
    },
    "search-filter": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/pages/MasterCardSearch.jsx",
        ],
        "outputFiles": [
            "components/search/SearchFilter.jsx",
        ],
    },
    "image-gallery": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/pages/Gallery.jsx",
        ],
        "outputFiles": [
            "components/media/Gallery.jsx",
        ],
    },
    "auth-context": {
        "type": "frontend",
        "bestSource": "slabtrack",
        "files": [
            "frontend/src/context/AuthContext.jsx",
            "frontend/src/hooks/useAuth.js",
            "frontend/src/api/auth.js",
        ],
        "outputFiles": [
            "context/AuthContext.jsx",
            "hooks/useAuth.js",
            "api/auth.js",
        ],
    },
    # BACKEND MODULES (family-huddle)
    "calendar": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/calendar.js",
        ],
        "outputFiles": [
            "routes/calendar.js",
        ],
    },
    "tasks": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/home.js",
        ],
        "outputFiles": [
            "routes/tasks.js",
        ],
    },
    "meals": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/meals.js",
        ],
        "outputFiles": [
            "routes/meals.js",
        ],
    },
    "kids-banking": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/kids-banking.js",
            "backend/routes/famcoin.js",
            "backend/services/famcoinEngine.js",
        ],
        "outputFiles": [
            "routes/kids-banking.js",
            "routes/virtual-currency.js",
            "services/virtual-currency-engine.js",
        ],
    },
    "family-groups": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/family.js",
        ],
        "outputFiles": [
            "routes/groups.js",
        ],
    },
    "documents": {
        "type": "backend",
        "bestSource": "family-huddle",
        "files": [
            "backend/routes/documents.js",
            "backend/services/documentsIntegration.js",
        ],
        "outputFiles": [
            "routes/documents.js",
            "services/documents.js",
        ],
    },
    # BACKEND MODULES (ubg)
    "inventory": {
        "type": "backend",
        "bestSource": "ubg",
        "files": [
            "backend/routes/inventory.js",
            "backend/routes/cards.js",
        ],
        "outputFiles": [
            "routes/inventory.js",
            "routes/items.js",
        ],
    },
    "marketplace": {
        "type": "backend",
        "bestSource": "ubg",
        "files": [
            "backend/routes/marketplace.js",
            "backend/routes/trading.js",
        ],
        "outputFiles": [
            "routes/marketplace.js",
            "routes/trading.js",
        ],
    },
    "page-generator": {
        "type": "backend",
        "bestSource": "ubg",
        "files": [
            "backend/routes/generate.js",
            "backend/routes/ai-editor.js",
        ],
        "outputFiles": [
            "routes/generate.js",
            "routes/ai-editor.js",
        ],
    },
    # BACKEND MODULES (campuswager)
    "pools": {
        "type": "backend",
        "bestSource": "campuswager",
        "files": [
            "backend/routes/pools.js",
        ],
        "outputFiles": [
            "routes/pools.js",
        ],
    },
    "schools": {
        "type": "backend",
        "bestSource": "campuswager",
        "files": [
            "backend/routes/schools.js",
            "backend/routes/platforms.js",
        ],
        "outputFiles": [
            "routes/schools.js",
            "routes/platforms.js",
        ],
    },
    "posts": {
        "type": "backend",
        "bestSource": "campuswager",
        "files": [
            "backend/routes/posts.js",
        ],
        "outputFiles": [
            "routes/posts.js",
        ],
    },
    # BACKEND MODULES (financial)
    "portfolio": {
        "type": "backend",
        "bestSource": "financial",
        "files": [
            "backend/routes/collection.js",
            "backend/routes/grading.js",
        ],
        "outputFiles": [
            "routes/portfolio.js",
            "routes/grading.js",
        ],
    },
    "achievements": {
        "type": "backend",
        "bestSource": "financial",
        "files": [
            "backend/routes/achievements.js",
            "backend/routes/challenges.js",
        ],
        "outputFiles": [
            "routes/achievements.js",
            "routes/challenges.js",
        ],
    },
    "social-feed": {
        "type": "backend",
        "bestSource": "financial",
        "files": [
            "backend/routes/feed.js",
        ],
        "outputFiles": [
            "routes/feed.js",
        ],
    },
    "payments": {
        "type": "backend",
        "bestSource": "financial",
        "files": [
            "backend/routes/payments.js",
            "backend/services/stripe-service.js",
        ],
        "outputFiles": [
            "routes/payments.js",
            "services/stripe.js",
        ],
    },
    # FRONTEND MODULES (financial)
    "admin-panel": {
        "type": "frontend",
        "bestSource": "financial",
        "files": [
            "frontend/components/admin-dashboard.js",
            "frontend/components/settings-panel.js",
        ],
        "outputFiles": [
            "components/admin/Dashboard.js",
            "components/admin/SettingsPanel.js",
        ],
    },
    "trading-hub": {
        "type": "frontend",
        "bestSource": "financial",
        "files": [
            "frontend/components/trading-hub.js",
            "frontend/components/trade-calculator.js",
        ],
        "outputFiles": [
            "components/trading/TradingHub.js",
            "components/trading/Calculator.js",
        ],
    },
    "marketplace-ui": {
        "type": "frontend",
        "bestSource": "financial",
        "files": [
            "frontend/components/marketplace/index.js",
            "frontend/components/marketplace/MarketplaceFilters.js",
            "frontend/components/marketplace/MarketplaceStats.js",
        ],
        "outputFiles": [
            "components/marketplace/Marketplace.js",
            "components/marketplace/Filters.js",
            "components/marketplace/Stats.js",
        ],
    },
    "card-components": {
        "type": "frontend",
        "bestSource": "financial",
        "files": [
            "frontend/components/card/CardPrice.js",
            "frontend/components/card-marketplace-092025.js",
        ],
        "outputFiles": [
            "components/cards/CardPrice.js",
            "components/cards/CardMarketplace.js",
        ],
    },
}

BUNDLES: Dict[str, List[str]] = {
    "core": ["auth", "file-upload", "login-form", "register-form", "header-nav", "footer-section", "modal-system", "auth-context"],
    "dashboard": ["admin-dashboard", "analytics", "stat-cards", "data-table", "admin-panel"],
    "commerce": ["stripe-payments", "checkout-flow", "pricing-table", "payments", "marketplace", "marketplace-ui"],
    "social": ["notifications", "chat", "social-feed", "posts"],
    "collectibles": ["ai-scanner", "collections", "showcase", "transfers", "collection-grid", "item-detail", "file-uploader", "card-components"],
    "ebay": ["ebay-integration"],
    "sports": ["fantasy", "betting", "leaderboard", "pools", "schools"],
    "family": ["calendar", "tasks", "meals", "kids-banking", "family-groups", "documents"],
    "inventory": ["inventory", "portfolio", "trading-hub"],
    "gamification": ["achievements"],
}


def validate_catalog() -> List[str]:
    """Return a list of problems in the manifest (empty when consistent)."""
    problems: List[str] = []
    for name, module in MODULES.items():
        if module.get("type") not in MODULE_TYPES:
            problems.append(f"{name}: unknown type {module.get('type')!r}")
        if module.get("bestSource") not in PLATFORMS:
            problems.append(f"{name}: unknown platform {module.get('bestSource')!r}")
        files = module.get("files", [])
        output_files = module.get("outputFiles", [])
        if len(files) != len(output_files):
            problems.append(
                f"{name}: {len(files)} source files but {len(output_files)} output files"
            )
    for bundle, members in BUNDLES.items():
        for member in members:
            if member not in MODULES:
                problems.append(f"bundle {bundle}: unknown module {member!r}")
    return problems
