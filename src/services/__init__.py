"""Application services layer.

Services sit between the Streamlit UI and the domain (input parsing, session
wiring). They should avoid UI concerns.
"""
