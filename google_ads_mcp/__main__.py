from google_ads_mcp.server import run_server

run_server()
