"""서비스 패키지: 비즈니스 로직 계층.

Service package: business logic layer.

Services call repositories for DB operations and may call other services
for cross-domain checks (e.g. the license service validating owners).
"""
