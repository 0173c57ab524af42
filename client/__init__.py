"""
client: console front end for the expense tracker API.
"""
