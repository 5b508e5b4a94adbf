"""
Matrix: 원소 타입에 독립적인 2차원 행렬
=========================================

Groth-Sahai 증명은 스칼라 행렬(R, S, T, Γ)과 커밋먼트 군 원소 행렬
(ι1(X), u, π, θ ...) 의 곱으로 쓰인다.

**원소가 갖춰야 할 연산**:
  a + b, -a, a * s (s 는 FR 스칼라), 클래스메서드 zero(), ==
  FR, Com1, Com2, ComT 모두 이 연산을 제공한다.

**두 가지 곱셈**:
  커밋먼트 군 원소끼리는 곱할 수 없고 스칼라로만 늘일 수 있다 (FR-가군).
  그래서 곱셈 진입점이 둘이다:
  - right_mul(rhs): self · rhs   (rhs 는 스칼라 행렬)
  - left_mul(lhs) : lhs · self   (lhs 는 스칼라 행렬)
  각 출력 칸은 "원소 * 스칼라" 를 원소 타입의 + 로 누적한다.

**차원**:
  (rows, cols) 는 생성 시 고정된다. 차원이 맞지 않는 연산은
  DimensionMismatch 로 즉시 거부한다.

사용 예시:
    >>> R = Matrix.rand(rng, 2, 2)
    >>> u = vec_to_col_vec(crs.u)          # 2×1 Com1
    >>> Ru = u.left_mul(R)                 # 2×1 Com1, R · u
"""

from groth_sahai.errors import DimensionMismatch
from groth_sahai.field import FR, random_scalar


class Matrix:
    """행 우선(row-major) 2차원 행렬.

    속성:
        rows: 행의 리스트 (각 행은 원소 리스트)
        cols: 열 수 (행이 0개여도 유지된다)
        zero: 원소 타입의 영원을 만드는 함수 (내부 차원이 0 인 곱셈에 필요)
    """

    def __init__(self, rows, zero=None, cols=None):
        rows = [list(row) for row in rows]
        if rows:
            width = len(rows[0])
            for i, row in enumerate(rows):
                if len(row) != width:
                    raise DimensionMismatch(
                        f"행 {i} 의 길이 {len(row)} 가 첫 행의 길이 {width} 와 다릅니다"
                    )
            if cols is not None and cols != width:
                raise DimensionMismatch(f"열 수 {cols} 가 행 길이 {width} 와 다릅니다")
            cols = width
        self.rows = rows
        self.cols = cols if cols is not None else 0
        if zero is None and rows and self.cols:
            zero = getattr(type(rows[0][0]), "zero", None)
        self.zero = zero

    @classmethod
    def new(cls, rows, zero=None):
        return cls(rows, zero=zero)

    @classmethod
    def zeros_column(cls, n, zero=None):
        """0×n 행렬 (세로 이어붙이기의 항등원)."""
        return cls([], zero=zero, cols=n)

    @classmethod
    def rand(cls, rng, r, c):
        """각 원소를 FR 에서 균등하게 뽑은 r×c 행렬."""
        return cls(
            [[random_scalar(rng) for _ in range(c)] for _ in range(r)],
            zero=FR.zero, cols=c,
        )

    @classmethod
    def from_vecs(cls, vecs, zero=None):
        return cls(vecs, zero=zero)

    def to_vecs(self):
        return [list(row) for row in self.rows]

    def dim(self):
        return (len(self.rows), self.cols)

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, idx):
        if isinstance(idx, tuple):
            i, j = idx
            return self.rows[i][j]
        return self.rows[idx]

    def __iter__(self):
        return iter(self.rows)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self.rows and not other.rows:
            # 행이 없는 행렬은 열 수와 관계없이 같은 값이다 (바이트열에 열 수가 남지 않는다)
            return True
        return self.dim() == other.dim() and self.rows == other.rows

    def __repr__(self):
        return f"Matrix({self.dim()[0]}x{self.dim()[1]}, {self.rows!r})"

    # ─── 원소별 연산 ───

    def _check_same_dim(self, other, op):
        if self.dim() != other.dim():
            raise DimensionMismatch(
                f"{op}: 차원이 다릅니다 {self.dim()} != {other.dim()}"
            )

    def add(self, other):
        self._check_same_dim(other, "add")
        return Matrix(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self.rows, other.rows)],
            zero=self.zero or other.zero, cols=self.cols,
        )

    def neg(self):
        return Matrix([[-a for a in row] for row in self.rows], zero=self.zero, cols=self.cols)

    def sub(self, other):
        return self.add(other.neg())

    def scalar_mul(self, scalar):
        """모든 원소에 스칼라를 곱한다 (원소 * scalar)."""
        return Matrix(
            [[a * scalar for a in row] for row in self.rows],
            zero=self.zero, cols=self.cols,
        )

    def transpose(self):
        n_rows, n_cols = self.dim()
        return Matrix(
            [[self.rows[i][j] for i in range(n_rows)] for j in range(n_cols)],
            zero=self.zero, cols=n_rows,
        )

    def vstack(self, other):
        """세로 이어붙이기. zeros_column(n) 이 항등원이다."""
        if self.cols != other.cols:
            raise DimensionMismatch(
                f"vstack: 열 수가 다릅니다 {self.cols} != {other.cols}"
            )
        return Matrix(self.rows + other.rows, zero=self.zero or other.zero, cols=self.cols)

    __add__ = add
    __neg__ = neg
    __sub__ = sub

    # ─── 곱셈 ───

    def _zero_element(self):
        if self.zero is None:
            raise DimensionMismatch("빈 행렬의 원소 타입을 알 수 없습니다 (zero 를 지정하세요)")
        return self.zero()

    def right_mul(self, rhs):
        """self · rhs. rhs 는 스칼라 행렬이다.

        out[i][j] = Σ_k self[i][k] * rhs[k][j]
        """
        m, k = self.dim()
        k2, n = rhs.dim()
        if k != k2:
            raise DimensionMismatch(
                f"right_mul: {self.dim()} · {rhs.dim()} 는 곱할 수 없습니다"
            )
        out = []
        for i in range(m):
            row = []
            for j in range(n):
                acc = self._zero_element()
                for t in range(k):
                    acc = acc + self.rows[i][t] * rhs.rows[t][j]
                row.append(acc)
            out.append(row)
        return Matrix(out, zero=self.zero, cols=n)

    def left_mul(self, lhs):
        """lhs · self. lhs 는 스칼라 행렬이다.

        out[i][j] = Σ_k self[k][j] * lhs[i][k]
        """
        m, k = lhs.dim()
        k2, n = self.dim()
        if k != k2:
            raise DimensionMismatch(
                f"left_mul: {lhs.dim()} · {self.dim()} 는 곱할 수 없습니다"
            )
        out = []
        for i in range(m):
            row = []
            for j in range(n):
                acc = self._zero_element()
                for t in range(k):
                    acc = acc + self.rows[t][j] * lhs.rows[i][t]
                row.append(acc)
            out.append(row)
        return Matrix(out, zero=self.zero, cols=n)


def vec_to_col_vec(vec, zero=None):
    """[x1, ..., xn] → n×1 열벡터 행렬."""
    return Matrix([[x] for x in vec], zero=zero, cols=1)


def col_vec_to_vec(mat):
    """n×1 열벡터 행렬 → [x1, ..., xn]."""
    if mat.cols != 1 and len(mat) > 0:
        raise DimensionMismatch(f"열벡터가 아닙니다: {mat.dim()}")
    return [row[0] for row in mat.rows]
