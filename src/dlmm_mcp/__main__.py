from dlmm_mcp.server import main

main()
