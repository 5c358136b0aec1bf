from marketroute.rules.loader import default_rules, load_rules
from marketroute.rules.models import RoutingRules

__all__ = ["RoutingRules", "default_rules", "load_rules"]
