"""Users Setup (설정, 로깅, 의존성 주입)."""
