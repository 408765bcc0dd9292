"""
Health check utilities
"""

import psutil
import time
from datetime import datetime
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict


class SystemHealth(BaseModel):
    """System health status model"""

    status: str
    timestamp: datetime
    uptime: float
    memory_usage: Dict[str, Any]
    cpu_usage: float
    local_keywords: int
    upstream_configured: bool

    model_config = ConfigDict()


class HealthChecker:
    """Health checking with process metrics and resolver readiness"""

    def __init__(self):
        self.start_time = time.time()

    def get_memory_info(self) -> Dict[str, Any]:
        """Get memory usage information"""
        memory = psutil.virtual_memory()
        return {
            "total": memory.total,
            "available": memory.available,
            "used": memory.used,
            "percentage": memory.percent,
        }

    def get_cpu_info(self) -> float:
        """Get CPU usage percentage since the previous call (non-blocking)"""
        return psutil.cpu_percent(interval=None)

    def get_system_health(
        self, *, local_keywords: int, upstream_configured: bool
    ) -> SystemHealth:
        """Get health status.

        A missing upstream key only degrades to "warning": local keywords
        still resolve.
        """
        memory = self.get_memory_info()
        cpu = self.get_cpu_info()

        status = "healthy"
        if memory["percentage"] > 90 or cpu > 95:
            status = "unhealthy"
        elif memory["percentage"] > 80 or cpu > 80 or not upstream_configured:
            status = "warning"

        return SystemHealth(
            status=status,
            timestamp=datetime.now(),
            uptime=time.time() - self.start_time,
            memory_usage=memory,
            cpu_usage=cpu,
            local_keywords=local_keywords,
            upstream_configured=upstream_configured,
        )


# Global health checker instance
health_checker = HealthChecker()
