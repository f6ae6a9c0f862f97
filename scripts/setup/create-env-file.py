#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""로컬 개발용 .env 템플릿 생성"""
import os
import sys
from pathlib import Path

# 프로젝트 루트
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"

# 민감 정보는 <...> 자리에 직접 입력
env_content = """# Environment
# development: 상세 에러 메시지 / production: 파일 로그 + 에러 메시지 숨김
ENVIRONMENT=development

# Database
DATABASE_URL=postgresql+asyncpg://<DB_USER>:<DB_PASSWORD>@localhost:5432/quizcert_db

# CORS (쉼표로 구분)
ALLOWED_ORIGINS=http://localhost:5173

# Gemini
GEMINI_API_KEY=<GEMINI_API_KEY>
GEMINI_MODEL=gemini-2.5-flash
GEMINI_MAX_CONCURRENT=2
GEMINI_TIMEOUT_SECONDS=60

# 인증 서비스(Supabase) JWT 설정
AUTH_JWT_SECRET=<SUPABASE_JWT_SECRET>
AUTH_JWT_ALGORITHM=HS256
AUTH_JWT_AUDIENCE=authenticated
"""


def create_env_file(force: bool = False):
    """.env 파일 생성 (UTF-8, BOM 없음, LF 줄바꿈)"""
    print(f"[INFO] .env 파일 생성 중: {env_file}")

    if env_file.exists():
        if not force:
            print("[INFO] .env 파일이 이미 있습니다. 덮어쓰려면 --force 옵션을 사용하세요")
            return
        backup_file = project_root / ".env.backup"
        print(f"[INFO] 기존 .env 파일 백업: {backup_file}")
        backup_file.write_text(env_file.read_text(encoding="utf-8"), encoding="utf-8")

    with open(env_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(env_content)

    # Windows에서는 chmod 스킵
    if os.name != "nt":
        os.chmod(env_file, 0o600)

    print(f"[OK] .env 파일 생성 완료: {env_file}")


if __name__ == "__main__":
    try:
        create_env_file(force="--force" in sys.argv)
    except OSError as e:
        print(f"\n[ERROR] 파일 생성 실패: {e.__class__.__name__}: {e}")
        sys.exit(1)
