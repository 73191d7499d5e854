"""Users Application Layer.

Use Cases (Commands/Queries)와 Ports를 정의합니다.

Components:
    - commands/: CreateUser, UpdateUser, DeleteUser
    - queries/: GetUser, GetAllUsers
    - common/ports/: UserRepository 인터페이스
    - common/dto/: 데이터 전송 객체
    - common/instrumentation.py: Use Case 로깅 래퍼
"""
