"""
Página única del generador: formulario + resultado.

El HTML es estático; el JS llama a `/api/v1/lesson-plans` y a `/export`.
El botón "Tạo kế hoạch" queda deshabilitado mientras hay una generación en
curso y el de descarga solo aparece cuando hay un plan.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from lesson_plan_core.prompts import DEFAULT_DURATION, DURATION_OPTIONS

router = APIRouter()


def _duration_options_html() -> str:
    return "\n".join(
        f'        <option value="{d}"{" selected" if d == DEFAULT_DURATION else ""}>{d}</option>'
        for d in DURATION_OPTIONS
    )


_PAGE_HTML = """<!doctype html>
<html lang="vi">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Trình Tạo Kế Hoạch Bài Giảng</title>
<style>
  body { font-family: 'Helvetica Neue', Arial, sans-serif; background: #f5f7fa; color: #1a1a1a; margin: 0; }
  .container { max-width: 820px; margin: 0 auto; padding: 2rem 1rem; }
  header { text-align: center; margin-bottom: 1.5rem; }
  .card { background: #fff; border-radius: 8px; padding: 1.5rem; box-shadow: 0 1px 4px rgba(0,0,0,.08); margin-bottom: 1.5rem; }
  .form-group { margin-bottom: 1rem; display: flex; flex-direction: column; gap: .4rem; }
  input[type=text], select { padding: .5rem; font-size: 1rem; }
  .btn { background: #2563eb; color: #fff; border: 0; border-radius: 6px; padding: .6rem 1.2rem; font-size: 1rem; cursor: pointer; }
  .btn:disabled { background: #93c5fd; cursor: progress; }
  .btn-secondary { background: #059669; }
  .results-header { display: flex; justify-content: space-between; align-items: center; }
  .error-message { background: #fee2e2; color: #991b1b; padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }
  .loading-indicator { text-align: center; padding: 1rem; }
  .lesson-plan { line-height: 1.6; }
  [hidden] { display: none !important; }
</style>
</head>
<body>
<main class="container">
  <header>
    <h1>Trình Tạo Kế Hoạch Bài Giảng</h1>
    <p>Tải lên tài liệu và để AI giúp bạn soạn giáo án đầy sáng tạo!</p>
  </header>

  <section class="card">
    <div class="form-group">
      <label for="topic">Chủ đề bài học</label>
      <input type="text" id="topic" placeholder="Ví dụ: Quang hợp ở thực vật" aria-required="true">
    </div>
    <div class="form-group">
      <label for="duration">Thời lượng</label>
      <select id="duration">
__DURATION_OPTIONS__
      </select>
    </div>
    <div class="form-group">
      <label for="file-upload">Tệp tài liệu tham khảo</label>
      <input type="file" id="file-upload" aria-required="true" multiple>
    </div>
    <div class="file-list" id="file-list" hidden>
      <h4>Các tệp đã chọn:</h4>
      <ul id="file-names"></ul>
    </div>
    <button class="btn" id="generate">Tạo kế hoạch</button>
  </section>

  <section class="results-container">
    <div class="loading-indicator" id="loading" hidden>Đang tạo kế hoạch, vui lòng chờ...</div>
    <div class="error-message" id="error" hidden></div>
    <div class="card" id="result" hidden>
      <div class="results-header">
        <h2>Kế Hoạch Bài Giảng Chi Tiết</h2>
        <button class="btn btn-secondary" id="download">Tải xuống</button>
      </div>
      <div class="lesson-plan" id="lesson-plan" aria-live="polite"></div>
    </div>
  </section>
</main>
<script>
(function () {
  const GENERIC_ERROR = "Đã xảy ra lỗi khi tạo kế hoạch. Vui lòng thử lại.";
  const $ = (id) => document.getElementById(id);
  let lessonPlan = "";

  $("file-upload").addEventListener("change", (e) => {
    const names = $("file-names");
    names.innerHTML = "";
    for (const f of e.target.files) {
      const li = document.createElement("li");
      li.textContent = f.name;
      names.appendChild(li);
    }
    $("file-list").hidden = e.target.files.length === 0;
  });

  $("generate").addEventListener("click", async () => {
    const btn = $("generate");
    const form = new FormData();
    form.append("topic", $("topic").value);
    form.append("duration", $("duration").value);
    for (const f of $("file-upload").files) form.append("files", f);

    btn.disabled = true;
    btn.textContent = "Đang tạo...";
    $("loading").hidden = false;
    $("error").hidden = true;
    $("result").hidden = true;
    lessonPlan = "";
    let message = GENERIC_ERROR;

    try {
      const resp = await fetch("/api/v1/lesson-plans", { method: "POST", body: form });
      let data = null;
      try {
        data = await resp.json();
      } catch (parseErr) {
        data = null;
      }
      if (!resp.ok || !data) {
        // Solo los mensajes fijos del servidor (detail string); el resto, genérico
        if (data && typeof data.detail === "string" && data.detail) message = data.detail;
        throw new Error(message);
      }
      lessonPlan = data.lesson_plan;
      $("lesson-plan").innerHTML = data.html;
      $("result").hidden = false;
    } catch (err) {
      console.error(err);
      $("error").textContent = message;
      $("error").hidden = false;
    } finally {
      $("loading").hidden = true;
      btn.disabled = false;
      btn.textContent = "Tạo kế hoạch";
    }
  });

  $("download").addEventListener("click", async () => {
    const topic = $("topic").value;
    if (!lessonPlan || !topic) return;
    const form = new FormData();
    form.append("topic", topic);
    form.append("lesson_plan", lessonPlan);
    const resp = await fetch("/api/v1/lesson-plans/export", { method: "POST", body: form });
    if (resp.status !== 200) return;

    const disposition = resp.headers.get("Content-Disposition") || "";
    const match = disposition.match(/filename\\*=UTF-8''([^;]+)/);
    const fileName = match ? decodeURIComponent(match[1]) : "ke-hoach-bai-giang.docx";
    const url = URL.createObjectURL(await resp.blob());
    const link = document.createElement("a");
    link.href = url;
    link.setAttribute("download", fileName);
    document.body.appendChild(link);
    link.click();
    document.body.removeChild(link);
    URL.revokeObjectURL(url);
  });
})();
</script>
</body>
</html>
""".replace("__DURATION_OPTIONS__", _duration_options_html())


@router.get("/", include_in_schema=False, response_class=HTMLResponse)
def lesson_plan_page():
    return HTMLResponse(_PAGE_HTML)
