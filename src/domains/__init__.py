"""Domain layer: bidding models, validation, and the bid controller.

Nothing here imports Streamlit; the UI talks to the domain through
src.services.
"""
