#!/usr/bin/env python3
"""
Startup script for the FRA DSS Assistant
"""
import subprocess
import sys
from pathlib import Path


def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# Application Configuration
FRA_APP_NAME=FRA DSS Assistant
FRA_APP_VERSION=1.0.0
FRA_DEBUG=true
FRA_LOG_LEVEL=INFO

# Catalog files (defaults to the bundled sample data)
# FRA_SCHEMES_FILE=data/schemes.json
# FRA_VILLAGES_FILE=data/villages.json

# Chat widget
FRA_TYPING_DELAY_MS=1500

# API Configuration
FRA_API_PREFIX=/api/v1
FRA_CORS_ORIGINS=http://localhost:3000,http://localhost:8080
FRA_HOST=0.0.0.0
FRA_PORT=8000
"""

        with open(env_path, 'w') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")


def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .")
        return False


def check_catalog():
    """Load the configured catalogs once to catch data errors early"""
    print("📚 Checking scheme and village catalogs...")

    from fra_assistant.services.catalog_service import CatalogLoadError, catalog_service

    try:
        catalog_service.load()
        print(f"✅ {len(catalog_service.schemes)} schemes and {len(catalog_service.villages)} villages loaded")
        return True
    except CatalogLoadError as e:
        print(f"❌ Catalog error: {e}")
        return False


def run_tests():
    """Run the test suite"""
    print("🧪 Running tests...")

    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ Tests passed successfully")
            return True
        else:
            print(f"❌ Tests failed:\n{result.stdout[-2000:]}")
            return False
    except Exception as e:
        print(f"❌ Failed to run tests: {e}")
        return False


def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    from fra_assistant.config import settings

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'fra_assistant.main:app',
            '--host', settings.host,
            '--port', str(settings.port),
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")


def main():
    """Main startup function"""
    print("🌿 FRA DSS Assistant")
    print("=" * 50)

    if not Path("fra_assistant").exists():
        print("❌ Please run this script from the project root directory")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        print("\n📦 Please install dependencies first:")
        print("   pip install -e .[test]")
        sys.exit(1)

    if not check_catalog():
        sys.exit(1)

    if not run_tests():
        print("\n⚠️  Some tests failed. The application may not work correctly.")

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Visit http://localhost:8000/docs for API documentation")
    print("2. Point the chat widget at /api/v1/chat")

    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn fra_assistant.main:app --reload")


if __name__ == "__main__":
    main()
