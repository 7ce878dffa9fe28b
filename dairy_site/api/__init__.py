"""
HTTP routes: public pages, flyer, admin login and the admin panel.
"""
