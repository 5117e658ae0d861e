"""Dash front end for project cost charts."""
