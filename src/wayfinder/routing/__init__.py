"""Routing: route registry, matching engine and reverse routing.

Routes and aliases are registered in a RouteContainer before serving;
the Router reads it and answers each request with a RouterResult.
"""
