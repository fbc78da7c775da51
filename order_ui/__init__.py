"""
Order UI Package

Realtime event type normalization (utils/realtime_events.py) and order
lifecycle stage classification with stage copy (services/order_stage.py).

Importing the classification modules never loads order_ui.config: hosts
that want .env-driven settings import it (and call setup_logging) themselves.
"""
