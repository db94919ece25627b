"""Entry points: command-line tools and the Streamlit dashboard."""
