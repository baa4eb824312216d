"""Django project package for the Tai Xiu tracker."""
