"""레포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package: Database query layer.
A single descriptor-driven engine: ``EntityDescriptor`` declares an entity,
``filters`` compiles its search condition into SQL, and ``BaseRepository``
runs the CRUD queries for it.
"""
