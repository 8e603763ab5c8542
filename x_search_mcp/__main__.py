from x_search_mcp.server import main

main()
