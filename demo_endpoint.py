"""
Quick demo script to run the role recommendation API locally.

This script starts a local server and shows how to make requests to the endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Role Recommendations Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - Recommendations:  POST http://localhost:8000/api/recommendations")
    print("   - API Docs:              http://localhost:8000/docs")
    print("   - ReDoc:                 http://localhost:8000/redoc")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/recommendations" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"userId": "<profile-id>"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "career_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
