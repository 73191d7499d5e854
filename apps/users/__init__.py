"""Users Application.

Clean Architecture 기반 사용자 관리 서비스입니다.

Layers:
    - domain/: 순수 비즈니스 로직 (User 엔티티, 값 객체, 도메인 예외)
    - application/: Use Cases (Commands/Queries)와 Ports
    - infrastructure/: 외부 시스템 연결 (PostgreSQL, In-memory)
    - presentation/: HTTP 인터페이스
    - setup/: 설정, 로깅 및 의존성 주입
"""

__version__ = "1.0.0"
