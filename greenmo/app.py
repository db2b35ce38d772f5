# greenmo/app.py
# Local stand-in for API Gateway + EventBridge: serves the lambda handlers over HTTP
# and optionally runs the notifier on a schedule.
import base64

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from apscheduler.schedulers.background import BackgroundScheduler

from greenmo.lambda_fns.chargeable_cars import lambda_handler as chargeable_cars
from greenmo.lambda_fns.notify import lambda_handler as notify
from greenmo.utils.env import DEFAULT_LOCATION, ENABLE_SCHEDULER, NOTIFY_INTERVAL

app = FastAPI(title="GreenMo charge notifier")
scheduler = BackgroundScheduler()


def schedule_notify(scheduler, location=DEFAULT_LOCATION, interval=NOTIFY_INTERVAL):
    """Run the notify handler for `location` every `interval` seconds."""
    return scheduler.add_job(
        notify,
        "interval",
        seconds=interval,
        args=[{"location": location}, None],
        id=f"notify-{location}",
        replace_existing=True,
    )


if ENABLE_SCHEDULER:
    schedule_notify(scheduler)
    scheduler.start()


def to_response(result) -> Response:
    """Translate an API Gateway proxy response into a FastAPI one."""
    headers = result.get("headers") or {}
    body = result.get("body", "")
    content = base64.b64decode(body) if result.get("isBase64Encoded") else body
    return Response(
        content=content,
        status_code=result["statusCode"],
        media_type=headers.get("Content-Type", "application/json"),
    )


@app.get("/chargeable-cars")
def api_chargeable_cars(request: Request):
    # API Gateway sends null instead of an empty dict
    event = {"queryStringParameters": dict(request.query_params) or None}
    return to_response(chargeable_cars(event, None))


@app.post("/notify")
async def api_notify(request: Request):
    body = await request.body()
    event = await request.json() if body else {}
    result = await run_in_threadpool(notify, event, None)
    return to_response(result)


@app.get("/")
def health():
    return {"status": "ok"}
