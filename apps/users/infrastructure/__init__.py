"""Users Infrastructure Layer.

Application 포트의 구현체를 제공합니다.

Components:
    - adapters/: 공용 어댑터 (UUID ID 생성기)
    - persistence_postgres/: SQLAlchemy(async) 기반 저장소와 DB 수명주기
    - persistence_memory/: 프로세스 내 저장소 (로컬 실행/테스트용)
"""
