"""
App layer: CLI (argparse).

역할:
- 인자 파싱, 명령 분기 (목록 / 템플릿 내용 / 생성)
- 에러 출력 + 종료 코드
- ⚠️ 템플릿 처리 로직 없음 (src/templates에 위임)
"""
