"""FastAPI 연동: 렌더러를 HTML 라우트에 연결."""
