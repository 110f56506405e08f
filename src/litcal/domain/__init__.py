"""Domain layer: the liturgical calendar date engine.

Every function here is a pure function of an integer year or a civil date.
This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
