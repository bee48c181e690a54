"""
AI 디자인 API 평가 스크립트

사용법:
    python evaluate_api.py --endpoint http://localhost:8000 --rounds 3

설명:
    - 실행 중인 서버에 4개 action을 각각 rounds회 요청
    - 응답 시간, 성공률, JSON 파싱 성공률(rawResponse 비율) 측정
    - 결과를 evaluation_report.md에 저장
"""

import argparse
import statistics
import time
from typing import Any, Dict, List

import requests

# action별 샘플 입력
SAMPLE_REQUESTS: Dict[str, Dict[str, Any]] = {
    "analyze-room": {
        "roomType": "Bedroom",
        "dimensions": {"length": "12", "width": "10", "height": "9"},
        "hasPhoto": False,
        "features": "one east-facing window",
    },
    "theme-recommendations": {
        "theme": "South Indian Traditional",
        "roomType": "Living Room",
        "dimensions": {"length": "14", "width": "12"},
        "budget": "₹1L - ₹3L",
    },
    "color-suggestions": {
        "mood": "Calm",
        "roomType": "Bedroom",
        "roomSize": "120 sq ft",
        "lighting": "Natural + Artificial",
    },
    "budget-optimize": {
        "totalBudget": 150000,
        "roomSize": 120,
        "roomType": "Bedroom",
        "categories": {"Furniture": 60000, "Flooring": 30000},
    },
}


class APITester:
    def __init__(self, endpoint: str, timeout: int = 60):
        self.endpoint = endpoint.rstrip('/')
        self.api_url = f"{self.endpoint}/api/room-design-ai"
        self.timeout = timeout

    def run_action(self, action: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """단일 action 요청"""
        print(f"Testing: {action}")

        start_time = time.time()
        try:
            response = requests.post(
                self.api_url,
                json={"action": action, "data": data},
                timeout=self.timeout
            )
            elapsed_time = time.time() - start_time
            body = response.json()

            if response.status_code == 200 and "result" in body:
                result = body["result"]
                return {
                    'action': action,
                    'success': True,
                    'status_code': response.status_code,
                    'processing_time': elapsed_time,
                    'structured': not (isinstance(result, dict) and 'rawResponse' in result),
                    'error': None
                }
            return {
                'action': action,
                'success': False,
                'status_code': response.status_code,
                'processing_time': elapsed_time,
                'error': body.get('error', response.text)
            }
        except (requests.RequestException, ValueError) as e:
            elapsed_time = time.time() - start_time
            return {
                'action': action,
                'success': False,
                'status_code': None,
                'processing_time': elapsed_time,
                'error': str(e)
            }

    def run(self, rounds: int) -> List[Dict[str, Any]]:
        """모든 action을 rounds회 실행"""
        results = []
        for round_idx in range(rounds):
            print(f"\nRound {round_idx + 1}/{rounds}")
            for action, data in SAMPLE_REQUESTS.items():
                results.append(self.run_action(action, data))
                time.sleep(1)  # 게이트웨이 rate limit 방지
        return results

    def generate_report(self, results: List[Dict[str, Any]], output_file: str = "evaluation_report.md"):
        """평가 보고서 생성"""
        total = len(results)
        successful = [r for r in results if r['success']]
        times = [r['processing_time'] for r in successful]

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write("# Room Design AI API 평가 보고서\n\n")

            f.write("## 1. 전체 요약\n\n")
            f.write(f"- 테스트 날짜: {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write(f"- API 엔드포인트: {self.api_url}\n")
            f.write(f"- 총 요청 수: {total}\n")
            if total:
                f.write(f"- 성공: {len(successful)} ({len(successful)/total*100:.1f}%)\n")
            if successful:
                structured = sum(1 for r in successful if r['structured'])
                f.write(f"- JSON 파싱 성공: {structured}/{len(successful)}\n")
            f.write("\n")

            f.write("## 2. 응답 시간\n\n")
            if times:
                f.write(f"- 평균: {statistics.mean(times):.2f}초\n")
                f.write(f"- 최소: {min(times):.2f}초\n")
                f.write(f"- 최대: {max(times):.2f}초\n")
                f.write(f"- 중앙값: {statistics.median(times):.2f}초\n\n")
            else:
                f.write("측정 불가\n\n")

            f.write("## 3. action별 결과\n\n")
            f.write("| action | 성공 | 실패 | 평균 시간 |\n")
            f.write("|--------|------|------|-----------|\n")
            for action in SAMPLE_REQUESTS:
                rows = [r for r in results if r['action'] == action]
                ok = [r for r in rows if r['success']]
                avg = statistics.mean(r['processing_time'] for r in ok) if ok else 0
                f.write(f"| {action} | {len(ok)} | {len(rows) - len(ok)} | {avg:.2f}초 |\n")
            f.write("\n")

            failures = [r for r in results if not r['success']]
            if failures:
                f.write("## 4. 실패 내역\n\n")
                for r in failures:
                    f.write(f"- **{r['action']}** (HTTP {r['status_code']}): {r['error']}\n")

        print(f"\n평가 보고서가 {output_file}에 저장되었습니다.")


def main():
    parser = argparse.ArgumentParser(description='Room Design AI API 평가')
    parser.add_argument('--endpoint', default='http://localhost:8000', help='API 엔드포인트 URL')
    parser.add_argument('--rounds', type=int, default=1, help='action별 반복 횟수')
    parser.add_argument('--output', default='evaluation_report.md', help='평가 보고서 출력 파일')

    args = parser.parse_args()

    tester = APITester(args.endpoint)
    results = tester.run(args.rounds)
    tester.generate_report(results, args.output)

    successful = sum(1 for r in results if r['success'])
    print(f"\n총 {len(results)}개 요청 완료")
    print(f"성공: {successful}, 실패: {len(results) - successful}")


if __name__ == "__main__":
    main()
