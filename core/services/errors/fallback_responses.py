"""Fallback responses for unmatched questions and error scenarios."""
from typing import Dict, Optional


class FallbackResponses:
    """Predefined copy for questions the catalog cannot answer."""
    
    MESSAGES: Dict[str, str] = {
        "personal": (
            "I can help with portfolio analysis, but I don't have access to personal account information. "
            "You can find your account details in the main dashboard or contact your advisor directly."
        ),
        "market": (
            "I specialize in your portfolio analysis. For real-time market data or economic forecasts, "
            "I'd recommend checking your trading platform or financial news sources."
        ),
        "financial_advice": (
            "This is a great question for personalized advice. I've added it to your advisor's review queue "
            "for detailed analysis. You should receive a response within 24 hours."
        ),
        "portfolio": (
            "I don't have specific data for this portfolio question yet. I've added it to our development "
            "queue to enhance my capabilities. Meanwhile, your advisor can provide detailed insights."
        ),
    }
    
    ACTION_TEXTS: Dict[str, str] = {
        "personal": "View Account Details",
        "market": "Open Market Data",
        "financial_advice": "Track Review Status",
        "portfolio": "Contact Advisor",
    }
    
    # Titles of the synthetic answers attached to no_match responses
    TITLES: Dict[str, str] = {
        "personal": "Account Information",
        "market": "Market Data",
        "portfolio": "Portfolio Analysis",
    }
    
    ERRORS: Dict[str, str] = {
        "validation_error": "Invalid request format",
        "internal_error": "Internal server error",
        "not_found": "Answer not found",
    }
    
    @classmethod
    def get_message(cls, fallback_type: str) -> str:
        """Get the user-facing message for a fallback type (portfolio copy for unknown types)."""
        return cls.MESSAGES.get(fallback_type, cls.MESSAGES["portfolio"])
    
    @classmethod
    def get_action_text(cls, fallback_type: str) -> Optional[str]:
        """Get the call-to-action label for a fallback type."""
        return cls.ACTION_TEXTS.get(fallback_type)
    
    @classmethod
    def get_title(cls, fallback_type: str) -> str:
        """Get the title of the synthetic fallback answer."""
        return cls.TITLES.get(fallback_type, cls.TITLES["portfolio"])
    
    @classmethod
    def get_error(cls, error_type: str) -> str:
        """Get a client-safe error message."""
        return cls.ERRORS.get(error_type, cls.ERRORS["internal_error"])
