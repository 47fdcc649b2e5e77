"""서비스 패키지: 비즈니스 로직 계층.

Service package: Business logic layer.
``CrudService`` validates write requests, calls the entity's repository and
projects ORM rows into response schemas.
"""
