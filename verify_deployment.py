#!/usr/bin/env python3
"""
Sitemap Service Deployment Verification Script
Run this script against a running instance before switching traffic to it
"""

import os
import sys
import requests
from datetime import datetime
from xml.etree import ElementTree

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def check_python_version():
    """Verify Python version is 3.11+"""
    version = sys.version_info
    if version.major == 3 and version.minor >= 11:
        print(f"✅ Python {version.major}.{version.minor}.{version.micro} - OK")
        return True
    else:
        print(f"❌ Python {version.major}.{version.minor}.{version.micro} - Required: Python 3.11+")
        return False


def check_environment_variables():
    """Check required environment variables"""
    required_vars = [
        'SITEMAP_ROOT_URL'
    ]

    missing_vars = []
    for var in required_vars:
        if not os.getenv(var):
            missing_vars.append(var)

    if missing_vars:
        print(f"❌ Missing environment variables: {', '.join(missing_vars)}")
        return False
    else:
        print("✅ Required environment variables - OK")
        return True


def check_api_endpoints(base_url="http://localhost:5000"):
    """Test API endpoints"""
    endpoints = [
        "/",
        "/health"
    ]

    all_ok = True

    for endpoint in endpoints:
        try:
            response = requests.get(f"{base_url}{endpoint}", timeout=10)
            if response.status_code == 200:
                print(f"✅ {endpoint} - OK (Status: {response.status_code})")
            else:
                print(f"❌ {endpoint} - Failed (Status: {response.status_code})")
                all_ok = False
        except requests.RequestException as e:
            print(f"❌ {endpoint} - Connection failed: {e}")
            all_ok = False

    return all_ok


def check_sitemap_document(body, root_url):
    """Validate a sitemap body; returns a list of problems (empty when valid)"""
    try:
        urlset = ElementTree.fromstring(body)
    except ElementTree.ParseError as e:
        return [f"sitemap is not well-formed XML: {e}"]

    problems = []
    if urlset.tag != f"{{{SITEMAP_NS}}}urlset":
        problems.append(f"unexpected root element {urlset.tag}")

    locations = [loc.text for loc in urlset.iter(f"{{{SITEMAP_NS}}}loc")]
    if not locations:
        problems.append("sitemap has no <loc> entries")
    elif root_url and locations[0] != root_url.rstrip('/'):
        problems.append(f"first <loc> is {locations[0]}, expected {root_url.rstrip('/')}")

    return problems


def check_sitemap_endpoint(base_url="http://localhost:5000", root_url=None, path=None):
    """Fetch the sitemap and validate content type and document"""
    root_url = root_url or os.getenv('SITEMAP_ROOT_URL', '')
    path = path or os.getenv('SITEMAP_PATH', '/sitemap.xml')

    try:
        response = requests.get(f"{base_url}{path}", timeout=10)
    except requests.RequestException as e:
        print(f"❌ {path} - Connection failed: {e}")
        return False

    if response.status_code != 200:
        print(f"❌ {path} - Failed (Status: {response.status_code})")
        return False

    content_type = response.headers.get('content-type', '')
    if not content_type.startswith('application/xml'):
        print(f"❌ {path} - Unexpected content type: {content_type}")
        return False

    problems = check_sitemap_document(response.content, root_url)
    for problem in problems:
        print(f"❌ {path} - {problem}")
    if problems:
        return False

    print(f"✅ {path} - OK")
    return True


def main():
    """Run all deployment checks"""
    base_url = os.getenv('DEPLOYMENT_URL', 'http://localhost:5000')

    print("🔍 Sitemap Service Deployment Verification")
    print("=" * 50)
    print(f"Timestamp: {datetime.now().isoformat()}")
    print(f"Target: {base_url}")
    print()

    checks = [
        ("Python Version", check_python_version),
        ("Environment Variables", check_environment_variables),
        ("API Endpoints", lambda: check_api_endpoints(base_url)),
        ("Sitemap", lambda: check_sitemap_endpoint(base_url))
    ]

    passed = 0
    total = len(checks)

    for name, check_func in checks:
        print(f"Checking {name}...")
        if check_func():
            passed += 1
        print()

    print("=" * 50)
    print(f"Results: {passed}/{total} checks passed")

    if passed == total:
        print("🚀 DEPLOYMENT READY - All checks passed!")
        return 0
    else:
        print("❌ DEPLOYMENT NOT READY - Please fix the issues above")
        return 1


if __name__ == "__main__":
    sys.exit(main())
