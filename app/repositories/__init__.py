"""리포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package: database query layer.

Each repository extends BaseRepository for generic CRUD and adds
entity-specific queries.
"""
