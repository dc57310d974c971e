import os, random, sys, time
from datetime import datetime, timezone
from pathlib import Path

import requests

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "backend"))

from rolling_avg.simulation.lorawan_encode import encode_float_le, to_base64, to_hex  # noqa: E402
from rolling_avg.simulation.rolling_window import RollingAverage  # noqa: E402

API = os.getenv("BACKEND_BASE", "http://localhost:8000")
DEVICE_ID = os.getenv("DEVICE_ID", "rolling-avg-node-01")
WINDOW = int(os.getenv("WINDOW", "10"))
PERIOD_S = float(os.getenv("PERIOD_S", "1"))


def build_uplink(f_cnt: int, payload: bytes) -> dict:
    return {
        "end_device_ids": {"device_id": DEVICE_ID},
        "received_at": datetime.now(timezone.utc).isoformat(),
        "uplink_message": {
            "f_port": 1,
            "f_cnt": f_cnt,
            "frm_payload": to_base64(payload),
        },
    }


def main():
    window = RollingAverage(WINDOW)
    f_cnt = 0
    while True:
        avg = window.add(22.0 + random.uniform(-1.0, 1.0))
        payload = encode_float_le(avg)
        r = requests.post(f"{API}/webhooks/ttn/uplink", json=build_uplink(f_cnt, payload), timeout=5)
        print(f_cnt, to_hex(payload), "->", r.status_code, r.json())
        f_cnt += 1
        time.sleep(PERIOD_S)


if __name__ == "__main__":
    main()
