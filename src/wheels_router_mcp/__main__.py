from wheels_router_mcp.server import main

main()
