# main.py - Main entry point
"""
Neural Net Wars - Main application entry point
Run this file to start the simulation
"""

import sys
from engine.simulation import Simulation, StartupError


def main():
    """Main function - Initialize and start the simulation"""
    print("🎮 Starting Neural Net Wars...")

    try:
        with Simulation() as simulation:
            simulation.run()
    except StartupError as e:
        print(f"❌ Failed to initialize game: {e}")
        return -1

    print("👋 Neural Net Wars shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
